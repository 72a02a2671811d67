"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Identifier, String

from ordering.domain import ordering


@ordering.event(part_of="Customer")
class CustomerRegistered:
    """A customer placed their first order and was registered."""

    __version__ = 1

    customer_email = String(required=True)
    first_name = String()
    last_name = String()
    registered_at = DateTime(required=True)


@ordering.event(part_of="Customer")
class AddressAdded:
    """A new delivery address was recorded against a customer."""

    __version__ = 1

    customer_email = String(required=True)
    address_id = Identifier(required=True)
    line = String(required=True)
