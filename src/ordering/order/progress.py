"""Production progress notifications for a single line item.

The resolver turns an order, a composite key and a progress value into a
fully rendered ``ProgressNotification``; dispatch is a separate step. Sending
never changes the order.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String

from notifications.dispatch import dispatch
from notifications.message import ProgressNotification
from notifications.templates import get_template
from ordering.catalog import get_catalog
from ordering.domain import ordering
from ordering.order.keys import LineItemKey, find_line_item
from ordering.order.order import Order
from ordering.order.queries import load_order

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class SendProgressNotification:
    order_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    product_key = String(required=True, max_length=300)
    progress = Integer(required=True, min_value=0, max_value=100)
    article_index = Integer(min_value=0)  # 0 means no article number


def product_title(catalog, product_id: str) -> str:
    """Current catalogue title of ``product_id``, or the id itself when it is gone."""
    products = catalog.find_products_by_ids([str(product_id)])
    for product in products:
        if product.product_id == str(product_id) and product.title:
            return product.title
    return str(product_id)


def resolve_progress_notification(order, key: LineItemKey, progress: int, email: str, catalog, article_index=None):
    """Build the progress message for the line item ``key`` addresses.

    The color label is echoed exactly as the caller wrote it.

    Raises:
        ObjectNotFoundError: no line item in ``order`` matches ``key``.
    """
    items = order.ordered_line_items
    index = find_line_item(items, key)
    if index is None:
        raise ObjectNotFoundError({"product_key": [f"Product {key} not found in order {order.id}"]})

    context = {
        "customer_name": order.customer_name,
        "short_order_id": order.short_id,
        "product_title": product_title(catalog, items[index].product_id),
        "color_label": key.color_label,
        "progress": progress,
        "article_index": article_index,
    }
    rendered = get_template("ProductionProgress").render(context)

    return ProgressNotification(
        to=email,
        customer_name=context["customer_name"],
        short_order_id=context["short_order_id"],
        product_title=context["product_title"],
        color_label=context["color_label"],
        progress=progress,
        article_index=article_index,
        subject=rendered["subject"],
        body_fr=rendered["body_fr"],
        body_ar=rendered["body_ar"],
        html_body=rendered["html_body"],
    )


@ordering.command_handler(part_of=Order)
class SendProgressNotificationHandler:
    @handle(SendProgressNotification)
    def send_progress_notification(self, command):
        key = LineItemKey.parse(command.product_key)

        order = load_order(command.order_id)

        message = resolve_progress_notification(
            order,
            key,
            command.progress,
            command.email,
            get_catalog(),
            article_index=command.article_index or None,
        )
        result = dispatch(message)

        logger.info(
            "Progress notification sent",
            order_id=str(order.id),
            product_key=str(key),
            progress=command.progress,
        )
        return result.get("message_id")
