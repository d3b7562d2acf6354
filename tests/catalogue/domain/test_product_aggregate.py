"""Tests for the Product aggregate."""

import pytest
from catalogue.product.events import ProductCreated, ProductDiscounted, ProductUpdated
from catalogue.product.product import DEFAULT_STOCK_QUANTITY, ColorName, Product
from protean.exceptions import ValidationError

RED = {"en": "Red", "fr": "Rouge", "ar": "أحمر"}
BLUE = {"en": "Blue", "fr": "Bleu", "ar": "أزرق"}


def _make_product(**overrides):
    defaults = {
        "title": "Embroidered Jebba",
        "description": "Hand-stitched ceremonial jebba",
        "category": "jebba",
        "colors": [
            {"name": RED, "image": "/uploads/jebba-red.png"},
            {"name": BLUE, "image": "/uploads/jebba-blue.png"},
        ],
        "old_price": 450.0,
        "new_price": 390.0,
    }
    defaults.update(overrides)
    return Product.create(**defaults)


class TestColorName:
    def test_requires_all_languages(self):
        with pytest.raises(ValidationError):
            ColorName(en="Red", fr="Rouge")


class TestProductCreation:
    def test_cover_image_is_first_color_image(self):
        assert _make_product().cover_image == "/uploads/jebba-red.png"

    def test_colors_keep_their_order(self):
        product = _make_product()
        assert [c.name.en for c in product.ordered_colors] == ["Red", "Blue"]

    def test_final_price_is_new_price(self):
        assert _make_product().final_price == 390.0

    def test_final_price_falls_back_to_old_price(self):
        assert _make_product(new_price=0.0).final_price == 450.0

    def test_default_stock_quantity(self):
        assert _make_product().stock_quantity == DEFAULT_STOCK_QUANTITY
        assert _make_product(stock_quantity=2).stock_quantity == 2

    def test_requires_a_color(self):
        with pytest.raises(ValidationError) as exc:
            _make_product(colors=[])
        assert "colors" in exc.value.messages

    def test_translations(self):
        translations = {"en": {"title": "T", "description": "D"}, "fr": {"title": "T-fr", "description": "D-fr"}}
        assert _make_product(translations=translations).translation_map == translations

    def test_raises_product_created(self):
        product = _make_product()
        event = product._events[0]
        assert isinstance(event, ProductCreated)
        assert event.new_price == 390.0


class TestProductUpdate:
    def test_replaces_colors_and_prices(self):
        product = _make_product()
        product.update(
            title="Jebba",
            description="Updated",
            category="jebba",
            colors=[{"name": BLUE, "image": "/uploads/jebba-blue.png"}],
            old_price=500.0,
            new_price=0.0,
            stock_quantity=4,
        )

        assert [c.name.en for c in product.ordered_colors] == ["Blue"]
        assert product.cover_image == "/uploads/jebba-blue.png"
        assert product.final_price == 500.0
        assert product.stock_quantity == 4
        assert isinstance(product._events[-1], ProductUpdated)


class TestApplyDiscount:
    def test_discount_is_taken_from_old_price(self):
        product = _make_product()
        assert product.apply_discount(20) == 360.0
        assert product.final_price == 360.0
        assert product.new_price == 390.0

    def test_raises_event(self):
        product = _make_product()
        product.apply_discount(10)
        event = product._events[-1]
        assert isinstance(event, ProductDiscounted)
        assert event.final_price == 405.0

    @pytest.mark.parametrize("percentage", [-5, 101, None])
    def test_percentage_range(self, percentage):
        with pytest.raises(ValidationError):
            _make_product().apply_discount(percentage)
