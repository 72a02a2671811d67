"""Ordering bounded context: customers, orders and order creation.

Orders are placed against the static store catalogue; the customer placing
the order is found or registered (keyed by email) in the same unit of work.
"""

from protean.domain import Domain

from ordering.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

ordering = Domain(name="ordering")
