"""Order creation: command and handler.

Every submitted entry is resolved against the catalogue and normalized into
a canonical line item before anything is persisted. One unknown product
fails the whole order.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from ordering.catalog import get_catalog
from ordering.domain import ordering
from ordering.order.colors import normalize_line_item
from ordering.order.order import Order
from ordering.order.reconciliation import compute_total, fetch_prices

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class CreateOrder:
    customer_name = String(required=True, max_length=255)
    email = String(required=True, max_length=254)
    phone = String(max_length=50)
    address = Text()  # JSON: address dict
    products = Text(required=True)  # JSON: list of {product_id, quantity, color, cover_image}


@ordering.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        entries = json.loads(command.products) if isinstance(command.products, str) else command.products
        if not isinstance(entries, list) or not entries:
            raise ValidationError({"products": ["An order needs at least one product"]})

        catalog = get_catalog()
        line_items_data = []
        for entry in entries:
            product_id = entry.get("product_id")
            if not product_id:
                raise ValidationError({"products": ["Every product entry needs a product_id"]})

            product = catalog.find_product_by_id(str(product_id))
            if product is None:
                logger.warning("Order references unknown product", product_id=str(product_id))
                raise ObjectNotFoundError({"product_id": [f"Referenced product not found: {product_id}"]})

            line_items_data.append(normalize_line_item(entry, product))

        prices = fetch_prices(catalog, [item["product_id"] for item in line_items_data])
        total_price = compute_total(line_items_data, prices)

        address = json.loads(command.address) if isinstance(command.address, str) else command.address

        order = Order.create(
            customer_name=command.customer_name,
            email=command.email,
            line_items_data=line_items_data,
            total_price=total_price,
            phone=command.phone,
            address=address,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order created",
            order_id=str(order.id),
            line_items=len(line_items_data),
            total_price=total_price,
        )
        return str(order.id)
