"""Order reads.

Orders are returned as plain dicts with every line item enriched with the
product's current title and cover image. The catalogue is queried once per
read, whatever the number of orders.
"""

import json

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.catalog import get_catalog
from ordering.order.order import Order

DEFAULT_IMAGE = "/assets/default-image.png"


def _line_item_view(item, products) -> dict:
    product = products.get(str(item.product_id))
    color = item.color
    return {
        "product_id": str(item.product_id),
        "quantity": item.quantity,
        "color": {"en": color.en, "fr": color.fr, "ar": color.ar} if color else None,
        "image": item.image,
        "title": product.title if product and product.title else str(item.product_id),
        "cover_image": (product.cover_image if product else None) or DEFAULT_IMAGE,
    }


def order_view(order, products: dict) -> dict:
    return {
        "id": str(order.id),
        "customer_name": order.customer_name,
        "email": order.email,
        "phone": order.phone,
        "address": json.loads(order.address) if order.address else None,
        "line_items": [_line_item_view(item, products) for item in order.ordered_line_items],
        "total_price": order.total_price,
        "is_paid": order.is_paid,
        "is_delivered": order.is_delivered,
        "product_progress": order.progress,
        "revision": order.revision,
        "created_at": order.created_at.isoformat() if order.created_at else None,
        "updated_at": order.updated_at.isoformat() if order.updated_at else None,
    }


def _views(orders) -> list[dict]:
    product_ids = sorted({str(item.product_id) for order in orders for item in order.line_items})
    products = {}
    if product_ids:
        products = {product.product_id: product for product in get_catalog().find_products_by_ids(product_ids)}
    return [order_view(order, products) for order in orders]


def load_order(order_id):
    """Fetch the Order aggregate, reporting a miss against ``order_id``."""
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError as exc:
        raise ObjectNotFoundError({"order_id": [f"Order {order_id} not found"]}) from exc


def get_order(order_id: str) -> dict:
    return _views([load_order(order_id)])[0]


def orders_for_email(email: str) -> list[dict]:
    """Orders placed with ``email``, newest first."""
    repo = current_domain.repository_for(Order)
    orders = repo._dao.query.filter(email=email).order_by("-created_at").all().items
    if not orders:
        raise ObjectNotFoundError({"email": [f"No orders found for {email}"]})
    return _views(orders)


def all_orders() -> list[dict]:
    repo = current_domain.repository_for(Order)
    return _views(repo._dao.query.order_by("-created_at").all().items)
