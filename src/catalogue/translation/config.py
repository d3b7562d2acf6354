"""Translation service settings, read from the environment."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationSettings:
    base_url: str = "http://localhost:5000"
    api_key: str | None = None
    source_language: str = "en"
    timeout: float = 5.0

    @classmethod
    def from_env(cls) -> "TranslationSettings":
        return cls(
            base_url=os.environ.get("TRANSLATION_URL", cls.base_url),
            api_key=os.environ.get("TRANSLATION_API_KEY"),
            source_language=os.environ.get("TRANSLATION_SOURCE_LANGUAGE", cls.source_language),
            timeout=float(os.environ.get("TRANSLATION_TIMEOUT", cls.timeout)),
        )
