"""Translator factory.

Provides get_translator() / set_translator() to swap implementations:
- FakeTranslator echoes text back unless told otherwise (default)
- HTTPTranslator calls a LibreTranslate-compatible service (``TRANSLATION_ADAPTER=http``)
"""

import os

from catalogue.translation.port import TranslationPort

_current_translator: TranslationPort | None = None


def get_translator() -> TranslationPort:
    """Return the configured translator (singleton)."""
    global _current_translator
    if _current_translator is None:
        adapter = os.environ.get("TRANSLATION_ADAPTER", "fake")
        if adapter == "fake":
            from catalogue.translation.fake_adapter import FakeTranslator

            _current_translator = FakeTranslator()
        elif adapter == "http":
            from catalogue.translation.config import TranslationSettings
            from catalogue.translation.http_adapter import HTTPTranslator

            _current_translator = HTTPTranslator(TranslationSettings.from_env())
        else:
            raise ValueError(f"Unknown translation adapter: {adapter}")
    return _current_translator


def set_translator(translator: TranslationPort) -> None:
    """Override the active translator (useful for tests)."""
    global _current_translator
    _current_translator = translator


def reset_translator() -> None:
    """Reset to the default translator."""
    global _current_translator
    _current_translator = None
