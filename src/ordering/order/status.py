"""Order status updates: command and handler."""

import json

import structlog
from protean import handle
from protean.fields import Boolean, Identifier, Integer, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order
from ordering.order.queries import load_order

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    is_paid = Boolean()
    is_delivered = Boolean()
    product_progress = Text()  # JSON: {"<product key>": percent}
    expected_revision = Integer(min_value=0)


@ordering.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        progress = None
        if command.product_progress is not None:
            progress = json.loads(command.product_progress)

        repo = current_domain.repository_for(Order)
        order = load_order(command.order_id)
        order.assert_revision(command.expected_revision)
        order.update_status(
            is_paid=command.is_paid,
            is_delivered=command.is_delivered,
            product_progress=progress,
        )
        repo.add(order)

        logger.info(
            "Order status updated",
            order_id=str(order.id),
            is_paid=order.is_paid,
            is_delivered=order.is_delivered,
            revision=order.revision,
        )
        return order.revision
