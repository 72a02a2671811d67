"""Repository for the Customer aggregate."""

from protean.exceptions import ObjectNotFoundError

from ordering.customer.customer import Customer
from ordering.domain import ordering


@ordering.repository(part_of=Customer)
class CustomerRepository:
    """Customers are keyed by email; ``add`` both inserts and updates."""

    def find_by_email(self, email: str) -> Customer | None:
        try:
            return self.get(email)
        except ObjectNotFoundError:
            return None
