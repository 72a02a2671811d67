"""Read access to orders. Nothing here writes."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.exceptions import OrderNotFound
from ordering.order.order import Order


def list_orders():
    return current_domain.repository_for(Order).list_all()


def list_customer_orders(email):
    return current_domain.repository_for(Order).for_customer(email)


def get_order(order_id):
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise OrderNotFound(order_id) from None
