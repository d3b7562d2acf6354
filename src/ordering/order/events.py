"""Domain events for the Order aggregate.

Events are versioned, immutable facts persisted to the event store on
commit and available to downstream consumers (reporting, notifications).
"""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderCreated:
    """A customer placed an order; line items are already normalized."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_name = String(required=True)
    email = String(required=True)
    line_items = Text(required=True)  # JSON: list of normalized line items
    total_price = Float(required=True)
    created_at = DateTime(required=True)


@ordering.event(part_of="Order")
class LineItemQuantityRemoved:
    """Quantity was removed from a line item and the total re-priced.

    ``remaining_quantity`` is 0 when the line item left the order.
    """

    __version__ = 1

    order_id = Identifier(required=True)
    product_id = Identifier(required=True)
    color_label = String(required=True)
    removed_quantity = Integer(required=True)
    remaining_quantity = Integer(required=True)
    previous_total = Float(required=True)
    new_total = Float(required=True)
    revision = Integer(required=True)


@ordering.event(part_of="Order")
class OrderStatusUpdated:
    """Paid/delivered flags or the per-product progress record changed."""

    __version__ = 1

    order_id = Identifier(required=True)
    is_paid = Boolean()
    is_delivered = Boolean()
    product_progress = Text()  # JSON: {"<product key>": percent}
    revision = Integer(required=True)
