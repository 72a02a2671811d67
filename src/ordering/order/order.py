"""Order aggregate, an order placed at one store for one customer.

An order is created once from validated catalogue items and is read-only
afterwards. It references its customer by email.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from ordering.domain import ordering
from ordering.order.events import OrderCreated


class OrderStatus(Enum):
    CREATED = "Created"


@ordering.entity(part_of="Order")
class OrderItem:
    """A catalogue product and the quantity ordered of it."""

    name = String(required=True, max_length=255)
    unit = String(required=True, max_length=50)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(default=1, min_value=1)

    @property
    def line_total(self):
        return self.price * self.quantity

    def to_dict(self):
        return {
            "name": self.name,
            "unit": self.unit,
            "price": self.price,
            "quantity": self.quantity,
        }


@ordering.aggregate(limit=None)
class Order:
    store = String(required=True, max_length=255)
    customer_email = String(required=True, max_length=254)
    address = String(required=True, max_length=500)
    items = HasMany(OrderItem)
    status = String(choices=OrderStatus, default=OrderStatus.CREATED.value)
    total = Float(default=0.0)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, store, customer_email, address, items_data):
        """Create an order from item dicts with name, unit, price and quantity."""
        if not items_data:
            raise ValidationError({"items": ["An order must contain at least one item"]})

        now = datetime.now(UTC)
        items = [
            OrderItem(
                name=item["name"],
                unit=item["unit"],
                price=item["price"],
                quantity=item.get("quantity", 1),
            )
            for item in items_data
        ]
        order = cls(
            store=store,
            customer_email=customer_email,
            address=address.strip(),
            items=items,
            total=round(sum(item.line_total for item in items), 2),
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                store=store,
                customer_email=customer_email,
                address=order.address,
                items=json.dumps([item.to_dict() for item in items]),
                total=order.total,
                created_at=now,
            )
        )
        return order
