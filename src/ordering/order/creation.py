"""Order creation command and handler.

The handler validates the requested items against the store catalogue before
writing anything, then reconciles the customer and persists the order. Both
writes happen inside the handler's unit of work and commit together.
"""

import json

from catalogue.loading import get_catalogue
from catalogue.store import Product, StoreNotFound
from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from ordering.customer.reconciliation import reconcile_customer
from ordering.domain import ordering
from ordering.exceptions import OrderValidationError
from ordering.order.order import Order
from ordering.utils.logging import get_logger

logger = get_logger(__name__)


@ordering.command(part_of="Order")
class CreateOrder:
    store = String(required=True, max_length=255)
    address = String(required=True, max_length=500)
    items = Text(required=True)  # JSON: list of {name, unit, price, quantity}
    customer_email = String(required=True, max_length=254)
    first_name = String(max_length=100)
    last_name = String(max_length=100)
    phone = String(max_length=20)


@ordering.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items
        if not items_data:
            raise OrderValidationError("An order must contain at least one item")

        try:
            requested = [Product.from_record(item) for item in items_data]
        except (KeyError, TypeError, ValueError) as exc:
            raise OrderValidationError(f"Malformed order items: {exc}") from exc

        try:
            unmatched = get_catalogue().unmatched_items(command.store, requested)
        except StoreNotFound:
            raise OrderValidationError("This store isn't found") from None

        if unmatched:
            raise OrderValidationError(
                "These products aren't found in the selected store",
                unmatched=[product.to_dict() for product in unmatched],
            )

        customer = reconcile_customer(
            email=command.customer_email,
            address=command.address,
            first_name=command.first_name,
            last_name=command.last_name,
            phone=command.phone,
        )

        order = Order.create(
            store=command.store,
            customer_email=customer.email,
            address=command.address,
            items_data=items_data,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order created",
            order_id=str(order.id),
            store=order.store,
            customer_email=order.customer_email,
            item_count=len(items_data),
        )
        return str(order.id)
