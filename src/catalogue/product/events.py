"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    title: String(required=True)
    category: String(required=True)
    new_price: Float(required=True)
    final_price: Float()
    created_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductUpdated:
    """Product details, prices or colors were replaced."""

    __version__ = 1

    product_id: Identifier(required=True)
    title: String(required=True)
    new_price: Float(required=True)
    final_price: Float()


@catalogue.event(part_of="Product")
class ProductDiscounted:
    __version__ = 1

    product_id: Identifier(required=True)
    percentage: Float(required=True)
    old_price: Float(required=True)
    final_price: Float(required=True)
