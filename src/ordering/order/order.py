"""Order aggregate: the core of the ordering domain.

An Order holds the customer's identity, an ordered sequence of line items
(product + resolved multilingual color + quantity), and a total price that
is always derived from current catalogue prices.

Line items are created once, at order creation, and afterwards can only
shrink or disappear. Every mutation bumps ``revision``, which callers may
send back as an optimistic concurrency token.
"""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import InvalidOperationError, ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    Text,
    ValueObject,
)

from ordering.domain import ordering
from ordering.order.events import LineItemQuantityRemoved, OrderCreated, OrderStatusUpdated
from ordering.order.keys import LineItemKey
from ordering.order.reconciliation import apply_removal, compute_total, plan_removal


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class ColorName:
    """A color label in English, French and Arabic.

    All three languages are mandatory: bare strings and partial translations
    are normalized away before an order is ever persisted.
    """

    en = String(required=True, max_length=100)
    fr = String(required=True, max_length=100)
    ar = String(required=True, max_length=100)

    @invariant.post
    def labels_must_not_be_blank(self):
        blank = [lang for lang in ("en", "fr", "ar") if not (getattr(self, lang) or "").strip()]
        if blank:
            raise ValidationError({"color": [f"Color label is blank for: {', '.join(blank)}"]})


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class LineItem:
    """One product + color + quantity entry within an order."""

    position = Integer(required=True, min_value=0)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    color = ValueObject(ColorName, required=True)
    image = String(max_length=500)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    customer_name = String(required=True, max_length=255)
    email = String(required=True, max_length=254)
    phone = String(max_length=50)
    address = Text()  # JSON: free-form address dict
    line_items = HasMany(LineItem)
    total_price = Float(default=0.0, min_value=0.0)
    is_paid = Boolean(default=False)
    is_delivered = Boolean(default=False)
    product_progress = Text()  # JSON: {"<product key>": percent}
    revision = Integer(default=0)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_name, email, line_items_data, total_price, phone=None, address=None):
        """Create an order from already-normalized line items.

        Args:
            customer_name: The customer's display name.
            email: Where progress notifications are sent.
            line_items_data: List of dicts with product_id, quantity,
                color ({en, fr, ar}) and image.
            total_price: Total computed from current catalogue prices.
            phone: Optional phone number.
            address: Optional address dict.
        """
        if not line_items_data:
            raise ValidationError({"products": ["An order needs at least one product"]})

        now = datetime.now(UTC)
        order = cls(
            customer_name=customer_name,
            email=email,
            phone=phone,
            address=json.dumps(address) if isinstance(address, dict) else address,
            total_price=total_price,
            product_progress=json.dumps({}),
            created_at=now,
            updated_at=now,
        )
        for position, data in enumerate(line_items_data):
            order.add_line_items(
                LineItem(
                    position=position,
                    product_id=data["product_id"],
                    quantity=data["quantity"],
                    color=ColorName(**data["color"]),
                    image=data.get("image"),
                )
            )

        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                customer_name=customer_name,
                email=email,
                line_items=json.dumps(line_items_data, ensure_ascii=False),
                total_price=total_price,
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def ordered_line_items(self):
        """Line items in the order they were submitted."""
        return sorted(self.line_items or [], key=lambda item: item.position)

    @property
    def progress(self) -> dict:
        return json.loads(self.product_progress) if self.product_progress else {}

    @property
    def short_id(self) -> str:
        return str(self.id)[:8]

    # -------------------------------------------------------------------
    # Concurrency
    # -------------------------------------------------------------------
    def assert_revision(self, expected_revision):
        """Reject a write based on a stale read. ``None`` skips the check."""
        if expected_revision is not None and expected_revision != self.revision:
            raise InvalidOperationError(
                {
                    "revision": [
                        f"Order {self.id} is at revision {self.revision}, request was based on {expected_revision}"
                    ]
                }
            )

    def _touch(self):
        self.revision = (self.revision or 0) + 1
        self.updated_at = datetime.now(UTC)

    # -------------------------------------------------------------------
    # Line-item removal
    # -------------------------------------------------------------------
    def remove_quantity(self, key: LineItemKey, quantity_to_remove: int, prices: dict):
        """Remove quantity from the line item addressed by ``key`` and re-price.

        The removal is planned and priced before anything changes, so a
        failure leaves the order exactly as it was.

        Args:
            key: Composite key in any of the three languages.
            quantity_to_remove: Positive quantity to take off the line item.
            prices: Current catalogue prices by product id.

        Returns:
            The new total price.
        """
        if quantity_to_remove is None or quantity_to_remove < 1:
            raise ValidationError({"quantity_to_remove": ["Quantity to remove must be at least 1"]})

        items = self.ordered_line_items
        removal = plan_removal(items, key, quantity_to_remove, order_id=self.id)
        new_total = compute_total(apply_removal(items, removal), prices)
        previous_total = self.total_price

        item = items[removal.index]
        if removal.drops_item:
            self.remove_line_items(item)
        else:
            item.quantity = removal.remaining_quantity
        self.total_price = new_total
        self._touch()

        self.raise_(
            LineItemQuantityRemoved(
                order_id=str(self.id),
                product_id=str(item.product_id),
                color_label=key.color_label,
                removed_quantity=removal.removed_quantity,
                remaining_quantity=removal.remaining_quantity,
                previous_total=previous_total,
                new_total=new_total,
                revision=self.revision,
            )
        )
        return new_total

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def update_status(self, is_paid=None, is_delivered=None, product_progress=None):
        """Update paid/delivered flags and the progress record.

        Values left as ``None`` keep their stored value.
        """
        if product_progress is not None:
            if not isinstance(product_progress, dict):
                raise ValidationError({"product_progress": ["Product progress must be an object"]})
            self.product_progress = json.dumps(product_progress, ensure_ascii=False)
        if is_paid is not None:
            self.is_paid = is_paid
        if is_delivered is not None:
            self.is_delivered = is_delivered
        self._touch()

        self.raise_(
            OrderStatusUpdated(
                order_id=str(self.id),
                is_paid=self.is_paid,
                is_delivered=self.is_delivered,
                product_progress=self.product_progress,
                revision=self.revision,
            )
        )
