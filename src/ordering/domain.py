"""Ordering bounded context: customer orders and line-item reconciliation.

Handles order creation (variant normalization against the catalogue),
quantity removal with live re-pricing, status updates, and the
production-progress notifications sent for individual line items.
"""

from protean.domain import Domain

from ordering.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
ordering = Domain(name="ordering")
