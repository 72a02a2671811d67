"""Repository for the Order aggregate."""

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.repository(part_of=Order)
class OrderRepository:
    def list_all(self) -> list[Order]:
        """All orders, oldest first."""
        return self._dao.query.order_by("created_at").all().items

    def for_customer(self, email: str) -> list[Order]:
        return self._dao.query.filter(customer_email=email).order_by("created_at").all().items
