"""Line-item quantity removal: command and handler.

Reads the order, prices every referenced product in one catalogue lookup,
applies the removal on the aggregate and writes the order back once.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from ordering.catalog import get_catalog
from ordering.domain import ordering
from ordering.order.keys import LineItemKey
from ordering.order.order import Order
from ordering.order.queries import load_order
from ordering.order.reconciliation import fetch_prices

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class RemoveLineItemQuantity:
    """Take ``quantity_to_remove`` units off the line item addressed by ``product_key``."""

    order_id = Identifier(required=True)
    product_key = String(required=True, max_length=300)  # "productId|color label"
    quantity_to_remove = Integer(required=True, min_value=1)
    expected_revision = Integer(min_value=0)


@ordering.command_handler(part_of=Order)
class RemoveLineItemQuantityHandler:
    @handle(RemoveLineItemQuantity)
    def remove_line_item_quantity(self, command):
        key = LineItemKey.parse(command.product_key)

        repo = current_domain.repository_for(Order)
        order = load_order(command.order_id)
        order.assert_revision(command.expected_revision)

        prices = fetch_prices(get_catalog(), [item.product_id for item in order.line_items])
        new_total = order.remove_quantity(key, command.quantity_to_remove, prices)
        repo.add(order)

        logger.info(
            "Line item quantity removed",
            order_id=str(order.id),
            product_key=str(key),
            quantity_removed=command.quantity_to_remove,
            new_total=new_total,
            revision=order.revision,
        )
        return {"total_price": new_total, "revision": order.revision}
