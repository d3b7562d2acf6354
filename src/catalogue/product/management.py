"""Product updates and deletion: commands and handlers."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.creation import load_colors
from catalogue.product.localization import localize_color, translate_details
from catalogue.product.product import Product

logger = structlog.get_logger(__name__)


def load_product(product_id):
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError as exc:
        raise ObjectNotFoundError({"product_id": [f"Product {product_id} not found"]}) from exc


@catalogue.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    title: String(required=True, max_length=255)
    description: Text(required=True)
    category: String(required=True, max_length=100)
    colors: Text(required=True)  # JSON: list of {color_name, image}
    old_price: Float(required=True, min_value=0.0)
    new_price: Float(required=True, min_value=0.0)
    stock_quantity: Integer(min_value=0)
    trending: Boolean(default=False)


@catalogue.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@catalogue.command_handler(part_of=Product)
class ProductManagementHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        colors = [localize_color(color) for color in load_colors(command.colors)]

        product = load_product(command.product_id)
        product.update(
            title=command.title,
            description=command.description,
            category=command.category,
            colors=colors,
            old_price=command.old_price,
            new_price=command.new_price,
            translations=translate_details(command.title, command.description),
            stock_quantity=command.stock_quantity,
            trending=command.trending,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("Product updated", product_id=str(product.id))

    @handle(DeleteProduct)
    def delete_product(self, command):
        product = load_product(command.product_id)
        current_domain.repository_for(Product)._dao.delete(product)

        logger.info("Product deleted", product_id=str(command.product_id))
