"""Customer reconciliation: find-or-register a customer and merge addresses."""

from protean.utils.globals import current_domain

from ordering.customer.customer import Customer
from ordering.exceptions import CustomerNotFound
from ordering.utils.logging import get_logger

logger = get_logger(__name__)


def reconcile_customer(email, address, first_name=None, last_name=None, phone=None):
    """Ensure a customer exists for ``email`` with ``address`` on record.

    A new customer is registered with ``address`` as its only address. For an
    existing customer the address is appended unless it is already recorded
    (after trimming); profile details of existing customers are left as they
    are. Exactly one customer record is created or updated per call.
    """
    repo = current_domain.repository_for(Customer)
    customer = repo.find_by_email(email)

    if customer is None:
        customer = Customer.register(
            email=email,
            address=address,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
        )
        logger.info("Registering customer", customer_email=email)
    elif customer.add_address(address) is not None:
        logger.info("Recording new address for customer", customer_email=email)

    repo.add(customer)
    return customer


def get_customer(email):
    customer = current_domain.repository_for(Customer).find_by_email(email)
    if customer is None:
        raise CustomerNotFound(email)
    return customer
