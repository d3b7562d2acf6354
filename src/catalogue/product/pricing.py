"""Percentage discounts: command and handler."""

from protean import handle
from protean.fields import Float, Identifier
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.management import load_product
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class ApplyDiscount:
    product_id: Identifier(required=True)
    percentage: Float(required=True, min_value=0.0, max_value=100.0)


@catalogue.command_handler(part_of=Product)
class ApplyDiscountHandler:
    @handle(ApplyDiscount)
    def apply_discount(self, command):
        product = load_product(command.product_id)
        final_price = product.apply_discount(command.percentage)
        current_domain.repository_for(Product).add(product)
        return final_price
