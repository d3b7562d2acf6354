"""Translation port: abstract interface for machine translation."""

from abc import ABC, abstractmethod


class TranslationError(Exception):
    """The translation service failed or returned an unusable answer."""


class TranslationPort(ABC):
    @abstractmethod
    def translate(self, text: str, target_language: str) -> str:
        """Translate ``text`` into ``target_language`` ("fr", "ar", ...).

        Raises:
            TranslationError: the text could not be translated.
        """
        ...
