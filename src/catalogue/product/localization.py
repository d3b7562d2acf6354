"""Machine translation of product text and color labels.

A failed translation falls back to the source text so that a product can
always be saved.
"""

from collections.abc import Mapping

import structlog
from protean.exceptions import ValidationError

from catalogue.translation import get_translator
from catalogue.translation.port import TranslationError

logger = structlog.get_logger(__name__)

TARGET_LANGUAGES = ("fr", "ar")


def translate_or_keep(text: str, target_language: str, translator=None) -> str:
    translator = translator or get_translator()
    try:
        return translator.translate(text, target_language)
    except TranslationError as exc:
        logger.warning("Translation failed, keeping source text", target=target_language, error=str(exc))
        return text


def translate_details(title: str, description: str, translator=None) -> dict:
    """Return ``{"en": {...}, "fr": {...}, "ar": {...}}`` for title and description."""
    translations = {"en": {"title": title, "description": description}}
    for lang in TARGET_LANGUAGES:
        translations[lang] = {
            "title": translate_or_keep(title, lang, translator),
            "description": translate_or_keep(description, lang, translator),
        }
    return translations


def localize_color(color: Mapping, translator=None) -> dict:
    """Turn a submitted color into ``{"name": {en, fr, ar}, "image"}``.

    ``color_name`` is either an English label, translated here, or a
    complete ``{en, fr, ar}`` mapping that is kept as it is.
    """
    name = color.get("color_name")
    if isinstance(name, Mapping) and all(name.get(lang) for lang in ("en", "fr", "ar")):
        labels = {lang: name[lang] for lang in ("en", "fr", "ar")}
    else:
        source = name.get("en") if isinstance(name, Mapping) else name
        if not source:
            raise ValidationError({"colors": ["Every color needs a color_name"]})
        labels = {"en": source}
        for lang in TARGET_LANGUAGES:
            labels[lang] = translate_or_keep(source, lang, translator)
    return {"name": labels, "image": color.get("image")}
