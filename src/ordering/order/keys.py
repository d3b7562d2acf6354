"""Composite line-item keys.

Operators address a line item as ``"<product_id>|<color label>"`` where the
label may be written in English, French or Arabic, depending on the locale
the order was viewed in. Keys are parsed from caller input on every request
and never stored.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from protean.exceptions import ValidationError

from ordering.order.colors import LANGUAGES

KEY_SEPARATOR = "|"


@dataclass(frozen=True)
class LineItemKey:
    product_id: str
    color_label: str

    @classmethod
    def parse(cls, raw: str) -> "LineItemKey":
        """Split ``raw`` on the first separator into product id and color label."""
        if not raw or KEY_SEPARATOR not in raw:
            raise ValidationError({"product_key": [f"Product key must look like 'productId{KEY_SEPARATOR}color'"]})

        product_id, color_label = raw.split(KEY_SEPARATOR, 1)
        if not product_id:
            raise ValidationError({"product_key": ["Product key is missing the product id"]})
        return cls(product_id=product_id, color_label=color_label)

    def __str__(self) -> str:
        return f"{self.product_id}{KEY_SEPARATOR}{self.color_label}"


def matched_language(color, label: str) -> str | None:
    """Return how ``label`` matches ``color``, or None.

    Rules, tried in order: a color stored as a bare string must equal the
    label (returns ``"raw"``); a multilingual color matches on its ``en``,
    ``fr`` then ``ar`` value (returns that language).
    """
    if color is None:
        return None
    if isinstance(color, str):
        return "raw" if color == label else None

    for lang in LANGUAGES:
        value = color.get(lang) if isinstance(color, Mapping) else getattr(color, lang, None)
        if value is not None and value == label:
            return lang
    return None


def find_line_item(line_items: Sequence, key: LineItemKey) -> int | None:
    """Return the index of the first line item addressed by ``key``.

    Two distinct colors can share a label across languages; the first match
    in line-item order wins.
    """
    for index, item in enumerate(line_items):
        if str(item.product_id) != key.product_id:
            continue
        if matched_language(item.color, key.color_label) is not None:
            return index
    return None
