"""Variant normalization: client color payloads to canonical line items.

Clients submit the chosen color in several shapes: a complete multilingual
label, a bare label string, a partial translation map, or nothing at all.
Incoming payloads are classified into a tagged variant first
(``MultilingualColor`` or ``RawColor``) and then normalized into the single
shape an order line item may persist: ``{"en", "fr", "ar"}`` plus an image.

Arabic is never derived from a non-Arabic raw value here. Translation
happens when products are authored in the catalogue, not when orders are
placed.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from protean.exceptions import ValidationError

LANGUAGES = ("en", "fr", "ar")

FALLBACK_LABEL = "Original"
FALLBACK_LABEL_AR = "أصلي"


@dataclass(frozen=True)
class MultilingualColor:
    """A color label available in every supported language."""

    en: str
    fr: str
    ar: str
    image: str | None = None

    def labels(self) -> dict[str, str]:
        return {"en": self.en, "fr": self.fr, "ar": self.ar}


@dataclass(frozen=True)
class RawColor:
    """A color as submitted when it is not a complete multilingual label.

    ``label`` holds a bare string value; the per-language fields hold
    whatever partial translations the client did send.
    """

    label: str | None = None
    en: str | None = None
    fr: str | None = None
    ar: str | None = None
    image: str | None = None


Color = MultilingualColor | RawColor


def _text(value) -> str | None:
    """Return ``value`` when it is a non-empty string, else None."""
    if isinstance(value, str) and value:
        return value
    return None


def parse_color(payload) -> Color:
    """Classify a client-submitted color payload.

    Accepted shapes::

        {"color_name": {"en": ..., "fr": ..., "ar": ...}, "image": ...}
        {"color_name": "Red", "image": ...}
        {"color_name": {"en": "Red"}}
        "Red"
        None
    """
    if payload is None:
        return RawColor()
    if isinstance(payload, str):
        return RawColor(label=_text(payload))
    if not isinstance(payload, Mapping):
        raise ValidationError({"color": [f"Unsupported color payload: {type(payload).__name__}"]})

    image = _text(payload.get("image"))
    name = payload.get("color_name", payload.get("colorName"))

    if isinstance(name, Mapping):
        labels = {lang: _text(name.get(lang)) for lang in LANGUAGES}
        if all(labels.values()):
            return MultilingualColor(image=image, **labels)
        return RawColor(image=image, **labels)

    return RawColor(label=_text(name), image=image)


def normalize_color(color: Color) -> dict[str, str]:
    """Produce the complete ``{en, fr, ar}`` label for a classified color."""
    if isinstance(color, MultilingualColor):
        return color.labels()

    return {
        "en": color.en or color.label or FALLBACK_LABEL,
        "fr": color.fr or color.label or FALLBACK_LABEL,
        "ar": color.ar or FALLBACK_LABEL_AR,
    }


def resolve_image(color: Color, cover_image_hint: str | None, catalogue_cover_image: str | None) -> str | None:
    """Pick the line-item image: color image, then entry hint, then catalogue cover."""
    return color.image or _text(cover_image_hint) or _text(catalogue_cover_image)


def normalize_line_item(entry: Mapping, product) -> dict:
    """Build the canonical line-item payload for one submitted order entry.

    Args:
        entry: Submitted entry with ``product_id``, ``quantity``, ``color``
            and an optional ``cover_image`` hint.
        product: The catalogue snapshot for ``entry["product_id"]``.

    Raises:
        ValidationError: when the quantity is not a positive integer, or
            when no image can be resolved for the chosen color.
    """
    quantity = entry.get("quantity")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError({"quantity": [f"Quantity for product {entry['product_id']} must be a positive integer"]})

    color = parse_color(entry.get("color"))
    image = resolve_image(color, entry.get("cover_image"), getattr(product, "cover_image", None))
    if image is None:
        raise ValidationError({"color": [f"No image could be resolved for the color of product {entry['product_id']}"]})

    return {
        "product_id": str(entry["product_id"]),
        "quantity": quantity,
        "color": normalize_color(color),
        "image": image,
    }
