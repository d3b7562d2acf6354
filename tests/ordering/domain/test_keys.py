"""Tests for composite line-item keys and line-item lookup."""

from types import SimpleNamespace

import pytest
from ordering.order.keys import LineItemKey, find_line_item, matched_language
from protean.exceptions import ValidationError

RED = {"en": "Red", "fr": "Rouge", "ar": "أحمر"}
BLUE = {"en": "Blue", "fr": "Bleu", "ar": "أزرق"}


def _item(product_id, color):
    return SimpleNamespace(product_id=product_id, color=color, quantity=1)


class TestLineItemKeyParsing:
    def test_parse(self):
        assert LineItemKey.parse("P1|Rouge") == LineItemKey(product_id="P1", color_label="Rouge")

    def test_splits_on_first_separator_only(self):
        key = LineItemKey.parse("P1|Red|Dark")
        assert key.product_id == "P1"
        assert key.color_label == "Red|Dark"

    def test_empty_color_label_is_allowed(self):
        assert LineItemKey.parse("P1|").color_label == ""

    def test_round_trips_to_string(self):
        assert str(LineItemKey.parse("P1|أحمر")) == "P1|أحمر"

    @pytest.mark.parametrize("raw", ["", "P1", "|Rouge"])
    def test_malformed_keys(self, raw):
        with pytest.raises(ValidationError) as exc:
            LineItemKey.parse(raw)
        assert "product_key" in exc.value.messages


class TestMatchedLanguage:
    def test_bare_string_color(self):
        assert matched_language("Rouge", "Rouge") == "raw"
        assert matched_language("Rouge", "Red") is None

    @pytest.mark.parametrize(("label", "lang"), [("Red", "en"), ("Rouge", "fr"), ("أحمر", "ar")])
    def test_multilingual_color(self, label, lang):
        assert matched_language(RED, label) == lang

    def test_object_color(self):
        assert matched_language(SimpleNamespace(**RED), "Rouge") == "fr"

    def test_no_match(self):
        assert matched_language(RED, "red") is None
        assert matched_language(None, "Red") is None


class TestFindLineItem:
    def test_product_id_must_match_exactly(self):
        items = [_item("P10", RED), _item("P1", RED)]
        assert find_line_item(items, LineItemKey.parse("P1|Red")) == 1

    def test_first_match_wins(self):
        shared = {"en": "Rouge", "fr": "Rouge", "ar": "أحمر"}
        items = [_item("P1", RED), _item("P1", shared)]
        assert find_line_item(items, LineItemKey.parse("P1|Rouge")) == 0

    def test_any_language_finds_the_same_item(self):
        items = [_item("P1", BLUE), _item("P1", RED)]
        for label in RED.values():
            assert find_line_item(items, LineItemKey(product_id="P1", color_label=label)) == 1

    def test_not_found(self):
        assert find_line_item([_item("P1", RED)], LineItemKey.parse("P1|Green")) is None
