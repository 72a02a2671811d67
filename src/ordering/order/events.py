"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderCreated:
    """An order was placed at a store for a customer."""

    __version__ = 1

    order_id = Identifier(required=True)
    store = String(required=True)
    customer_email = String(required=True)
    address = String(required=True)
    items = Text(required=True)  # JSON: list of item dicts
    total = Float(required=True)
    created_at = DateTime(required=True)
