"""HTTP translator for LibreTranslate-compatible services.

POSTs ``{"q", "source", "target", "format"}`` to ``<base_url>/translate``
and reads ``translatedText`` from the JSON answer.
"""

import requests
import structlog

from catalogue.translation.config import TranslationSettings
from catalogue.translation.port import TranslationError, TranslationPort

logger = structlog.get_logger(__name__)


class HTTPTranslator(TranslationPort):
    def __init__(self, settings: TranslationSettings, session: requests.Session | None = None):
        self.settings = settings
        self.session = session or requests.Session()

    def translate(self, text: str, target_language: str) -> str:
        payload = {
            "q": text,
            "source": self.settings.source_language,
            "target": target_language,
            "format": "text",
        }
        if self.settings.api_key:
            payload["api_key"] = self.settings.api_key

        try:
            response = self.session.post(
                f"{self.settings.base_url.rstrip('/')}/translate",
                json=payload,
                timeout=self.settings.timeout,
            )
            response.raise_for_status()
            translated = response.json().get("translatedText")
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Translation request failed", target=target_language, error=str(exc))
            raise TranslationError(str(exc)) from exc

        if not isinstance(translated, str) or not translated:
            raise TranslationError(f"No translation returned for target '{target_language}'")
        return translated
