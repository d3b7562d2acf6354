"""Tests for quantity removal planning and total reconciliation."""

from types import SimpleNamespace

import pytest
from ordering.catalog.fake_adapter import FakeCatalog
from ordering.order.keys import LineItemKey
from ordering.order.reconciliation import (
    QuantityRemoval,
    apply_removal,
    compute_total,
    fetch_prices,
    plan_removal,
)
from protean.exceptions import InvalidOperationError, ObjectNotFoundError

RED = {"en": "Red", "fr": "Rouge", "ar": "أحمر"}
BLUE = {"en": "Blue", "fr": "Bleu", "ar": "أزرق"}


@pytest.fixture()
def items():
    return [
        SimpleNamespace(product_id="P1", color=RED, quantity=5),
        SimpleNamespace(product_id="P2", color=BLUE, quantity=1),
    ]


class TestPlanRemoval:
    def test_partial(self, items):
        removal = plan_removal(items, LineItemKey.parse("P1|Rouge"), 2)
        assert removal == QuantityRemoval(index=0, previous_quantity=5, removed_quantity=2)
        assert removal.remaining_quantity == 3
        assert removal.drops_item is False

    def test_exact_quantity_drops_item(self, items):
        assert plan_removal(items, LineItemKey.parse("P1|أحمر"), 5).drops_item is True

    def test_more_than_available(self, items):
        with pytest.raises(InvalidOperationError):
            plan_removal(items, LineItemKey.parse("P1|Red"), 6)
        assert items[0].quantity == 5

    def test_unknown_line_item(self, items):
        with pytest.raises(ObjectNotFoundError):
            plan_removal(items, LineItemKey.parse("P1|Bleu"), 1)


class TestApplyRemoval:
    def test_keeps_other_items_in_place(self, items):
        removal = plan_removal(items, LineItemKey.parse("P1|Red"), 2)
        assert apply_removal(items, removal) == [
            {"product_id": "P1", "quantity": 3},
            {"product_id": "P2", "quantity": 1},
        ]

    def test_drops_item_at_zero(self, items):
        removal = plan_removal(items, LineItemKey.parse("P1|Red"), 5)
        assert apply_removal(items, removal) == [{"product_id": "P2", "quantity": 1}]


class TestComputeTotal:
    def test_sums_price_times_quantity(self):
        line_items = [{"product_id": "P1", "quantity": 3}, {"product_id": "P2", "quantity": 2}]
        assert compute_total(line_items, {"P1": 100.0, "P2": 40.0}) == 380.0

    def test_unknown_products_contribute_nothing(self):
        assert compute_total([{"product_id": "GONE", "quantity": 4}], {}) == 0.0

    def test_accepts_objects(self, items):
        assert compute_total(items, {"P1": 10.0, "P2": 1.0}) == 51.0

    def test_empty(self):
        assert compute_total([], {"P1": 10.0}) == 0.0


class TestFetchPrices:
    def test_single_batched_lookup_for_distinct_ids(self):
        catalog = FakeCatalog()
        catalog.add_product("P1", price=100.0)
        catalog.add_product("P2", price=40.0)

        prices = fetch_prices(catalog, ["P2", "P1", "P2", "GONE"])

        assert prices == {"P1": 100.0, "P2": 40.0}
        assert catalog.calls == [{"method": "find_products_by_ids", "product_ids": ["GONE", "P1", "P2"]}]

    def test_no_ids_no_lookup(self):
        catalog = FakeCatalog()
        assert fetch_prices(catalog, []) == {}
        assert catalog.calls == []
