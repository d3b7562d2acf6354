"""Fake translator: dictionary lookups, recorded calls, optional outage."""

from catalogue.translation.port import TranslationError, TranslationPort


class FakeTranslator(TranslationPort):
    """Returns registered translations, or the source text when none is known."""

    def __init__(self, translations: dict | None = None):
        self.translations: dict[tuple[str, str], str] = dict(translations or {})
        self.calls: list[tuple[str, str]] = []
        self.should_succeed = True

    def add(self, text: str, target_language: str, translated: str) -> None:
        self.translations[(text, target_language)] = translated

    def configure(self, should_succeed: bool = True) -> None:
        self.should_succeed = should_succeed

    def translate(self, text: str, target_language: str) -> str:
        self.calls.append((text, target_language))
        if not self.should_succeed:
            raise TranslationError("Translation service unavailable")
        return self.translations.get((text, target_language), text)

    def reset(self) -> None:
        self.translations.clear()
        self.calls.clear()
        self.should_succeed = True
