"""Shared BDD fixtures and step definitions for order placement."""

import json

import pytest
from ordering.customer.customer import Customer
from ordering.exceptions import OrderValidationError
from ordering.order.creation import CreateOrder
from ordering.order.queries import list_orders
from protean import current_domain
from pytest_bdd import given, parsers, then, when


def place_order(email, store, address, items):
    command = CreateOrder(
        store=store,
        address=address,
        customer_email=email,
        items=json.dumps(items),
    )
    return current_domain.process(command, asynchronous=False)


@pytest.fixture()
def outcome():
    """Holds the created order id or the rejection raised by the last order."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('customer "{email}" has ordered to "{address}"'))
def customer_has_ordered(email, address):
    place_order(email, "Downtown", address, [{"name": "Bread", "unit": "loaf", "price": 2.5}])


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('"{email}" orders {quantity:d} "{name}" "{unit}" at {price:f} from "{store}" to "{address}"'))
def order_placed(outcome, email, quantity, name, unit, price, store, address):
    items = [{"name": name, "unit": unit, "price": price, "quantity": quantity}]
    try:
        outcome["order_id"] = place_order(email, store, address, items)
    except OrderValidationError as exc:
        outcome["error"] = exc


# ---------------------------------------------------------------------------
# Given / Then steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('no customer exists for "{email}"'))
@then(parsers.cfparse('no customer exists for "{email}"'))
def no_customer(email):
    assert current_domain.repository_for(Customer).find_by_email(email) is None


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the order is created")
def order_created(outcome):
    assert "error" not in outcome
    assert outcome["order_id"]


@then(parsers.cfparse('the order is rejected with "{message}"'))
def order_rejected(outcome, message):
    assert isinstance(outcome.get("error"), OrderValidationError)
    assert outcome["error"].message == message


@then(parsers.cfparse("there are {count:d} orders"))
def order_count(count):
    assert len(list_orders()) == count
