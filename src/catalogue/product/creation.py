"""Product creation: command and handler."""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.localization import localize_color, translate_details
from catalogue.product.product import Product

logger = structlog.get_logger(__name__)


@catalogue.command(part_of="Product")
class CreateProduct:
    title: String(required=True, max_length=255)
    description: Text(required=True)
    category: String(required=True, max_length=100)
    colors: Text(required=True)  # JSON: list of {color_name, image}
    old_price: Float(required=True, min_value=0.0)
    new_price: Float(required=True, min_value=0.0)
    stock_quantity: Integer(min_value=0)
    trending: Boolean(default=False)


def load_colors(raw) -> list:
    colors = json.loads(raw) if isinstance(raw, str) else raw
    if not isinstance(colors, list) or not colors:
        raise ValidationError({"colors": ["At least one color must be provided"]})
    return colors


@catalogue.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        colors = [localize_color(color) for color in load_colors(command.colors)]

        product = Product.create(
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

        logger.info("Product created", product_id=str(product.id), colors=len(colors))
        return str(product.id)
