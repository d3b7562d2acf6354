"""Order deletion: command and handler. Deletion is terminal."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order
from ordering.order.queries import load_order

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class DeleteOrder:
    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        order_id = str(command.order_id)
        order = load_order(order_id)
        current_domain.repository_for(Order)._dao.delete(order)

        logger.info("Order deleted", order_id=order_id)
        return order_id
