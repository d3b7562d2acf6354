"""Line-item quantity removal and order total reconciliation.

Order totals are never trusted from client input. They are recomputed from
the current catalogue price of every referenced product whenever line items
are created or changed, so a total reflects prices at mutation time rather
than at order time.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from protean.exceptions import InvalidOperationError, ObjectNotFoundError

from ordering.order.keys import LineItemKey, find_line_item


@dataclass(frozen=True)
class QuantityRemoval:
    """The effect of removing quantity from one line item."""

    index: int
    previous_quantity: int
    removed_quantity: int

    @property
    def remaining_quantity(self) -> int:
        return self.previous_quantity - self.removed_quantity

    @property
    def drops_item(self) -> bool:
        return self.remaining_quantity == 0


def plan_removal(line_items: Sequence, key: LineItemKey, quantity_to_remove: int, order_id=None) -> QuantityRemoval:
    """Locate the addressed line item and check the removal is possible.

    Nothing is mutated here, so a failure leaves the order untouched.

    Raises:
        ObjectNotFoundError: no line item matches ``key``.
        InvalidOperationError: ``quantity_to_remove`` exceeds the item's quantity.
    """
    index = find_line_item(line_items, key)
    if index is None:
        raise ObjectNotFoundError({"product_key": [f"Line item {key} not found in order {order_id}"]})

    current = line_items[index].quantity
    if quantity_to_remove > current:
        raise InvalidOperationError(
            {"quantity_to_remove": [f"Cannot remove {quantity_to_remove} items, only {current} in the order"]}
        )

    return QuantityRemoval(index=index, previous_quantity=current, removed_quantity=quantity_to_remove)


def apply_removal(line_items: Sequence, removal: QuantityRemoval) -> list[dict]:
    """Return the new line-item sequence as ``{"product_id", "quantity"}`` pairs.

    Untouched items keep their position; the addressed item is dropped when
    its remaining quantity reaches zero.
    """
    result = []
    for index, item in enumerate(line_items):
        quantity = item.quantity
        if index == removal.index:
            if removal.drops_item:
                continue
            quantity = removal.remaining_quantity
        result.append({"product_id": str(item.product_id), "quantity": quantity})
    return result


def compute_total(line_items: Iterable, prices: Mapping[str, float]) -> float:
    """Sum ``price × quantity`` over line items.

    Products without a known price contribute nothing, so removals still
    complete after a product has been deleted from the catalogue.
    """
    total = 0.0
    for item in line_items:
        product_id = str(item["product_id"] if isinstance(item, Mapping) else item.product_id)
        quantity = item["quantity"] if isinstance(item, Mapping) else item.quantity
        total += prices.get(product_id, 0.0) * quantity
    return total


def fetch_prices(catalog, product_ids: Iterable[str]) -> dict[str, float]:
    """Fetch current prices for all distinct ``product_ids`` in one lookup."""
    distinct = sorted({str(pid) for pid in product_ids})
    if not distinct:
        return {}
    return {product.product_id: product.price for product in catalog.find_products_by_ids(distinct)}
