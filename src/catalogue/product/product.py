"""Product aggregate root with its color variants."""

import json
from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Float,
    HasMany,
    Integer,
    String,
    Text,
    ValueObject,
)

from catalogue.domain import catalogue

DEFAULT_STOCK_QUANTITY = 10


@catalogue.value_object(part_of="Product")
class ColorName:
    """A color label in English, French and Arabic."""

    en: String(required=True, max_length=100)
    fr: String(required=True, max_length=100)
    ar: String(required=True, max_length=100)

    @invariant.post
    def labels_must_not_be_blank(self):
        for lang in ("en", "fr", "ar"):
            if not (getattr(self, lang) or "").strip():
                raise ValidationError({"colors": [f"Color label '{lang}' must not be blank"]})


@catalogue.entity(part_of="Product")
class ColorVariant:
    name: ValueObject(ColorName, required=True)
    image: String(required=True, max_length=500)
    position: Integer(default=0)


def _color_variants(colors):
    """Build ColorVariant entities from ``{"name": {en, fr, ar}, "image"}`` dicts."""
    if not colors:
        raise ValidationError({"colors": ["At least one color must be provided"]})
    return [
        ColorVariant(name=ColorName(**color["name"]), image=color["image"], position=position)
        for position, color in enumerate(colors)
    ]


@catalogue.aggregate
class Product:
    """Product aggregate root."""

    title: String(required=True, max_length=255)
    description: Text(required=True)
    translations: Text()  # JSON: {"en": {"title", "description"}, "fr": {...}, "ar": {...}}
    category: String(required=True, max_length=100)
    cover_image: String(required=True, max_length=500)
    colors: HasMany(ColorVariant)
    old_price: Float(required=True, min_value=0.0)
    new_price: Float(required=True, min_value=0.0)
    final_price: Float(min_value=0.0)
    stock_quantity: Integer(default=DEFAULT_STOCK_QUANTITY, min_value=0)
    trending: Boolean(default=False)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @property
    def ordered_colors(self):
        return sorted(self.colors or [], key=lambda color: color.position)

    @property
    def translation_map(self) -> dict:
        return json.loads(self.translations) if self.translations else {}

    @classmethod
    def create(
        cls,
        title,
        description,
        category,
        colors,
        old_price,
        new_price,
        translations=None,
        stock_quantity=None,
        trending=False,
    ):
        """Create a product from translated color dicts.

        The first color's image becomes the cover image, and the final price
        is the new price, falling back to the old price.
        """
        from catalogue.product.events import ProductCreated

        variants = _color_variants(colors)
        now = datetime.now()
        product = cls(
            title=title,
            description=description,
            translations=json.dumps(translations, ensure_ascii=False) if translations else None,
            category=category,
            cover_image=variants[0].image,
            colors=variants,
            old_price=old_price,
            new_price=new_price,
            final_price=new_price or old_price,
            stock_quantity=DEFAULT_STOCK_QUANTITY if stock_quantity is None else stock_quantity,
            trending=bool(trending),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                title=title,
                category=category,
                new_price=product.new_price,
                final_price=product.final_price,
                created_at=now,
            )
        )
        return product

    def update(
        self,
        title,
        description,
        category,
        colors,
        old_price,
        new_price,
        translations=None,
        stock_quantity=None,
        trending=False,
    ):
        """Replace the product's details and colors."""
        from catalogue.product.events import ProductUpdated

        variants = _color_variants(colors)
        with atomic_change(self):
            for color in list(self.colors):
                self.remove_colors(color)
            self.add_colors(variants)
            self.title = title
            self.description = description
            if translations:
                self.translations = json.dumps(translations, ensure_ascii=False)
            self.category = category
            self.cover_image = variants[0].image
            self.old_price = old_price
            self.new_price = new_price
            self.final_price = new_price or old_price
            self.stock_quantity = DEFAULT_STOCK_QUANTITY if stock_quantity is None else stock_quantity
            self.trending = bool(trending)
        self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                title=self.title,
                new_price=self.new_price,
                final_price=self.final_price,
            )
        )

    def apply_discount(self, percentage):
        """Set the final price to the old price less ``percentage`` percent."""
        from catalogue.product.events import ProductDiscounted

        if percentage is None or not 0 <= percentage <= 100:
            raise ValidationError({"percentage": ["Discount percentage must be between 0 and 100"]})

        self.final_price = self.old_price - (self.old_price * percentage) / 100
        self.updated_at = datetime.now()

        self.raise_(
            ProductDiscounted(
                product_id=self.id,
                percentage=percentage,
                old_price=self.old_price,
                final_price=self.final_price,
            )
        )
        return self.final_price
