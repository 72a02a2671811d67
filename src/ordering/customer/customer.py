"""Customer aggregate root with Address entity and Profile value object.

Customers are keyed by email. They are registered the first time an order
arrives from an email address and only ever grow their address book
afterwards: every distinct delivery address used on an order is recorded
once, compared after trimming surrounding whitespace.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, String, ValueObject

from ordering.customer.events import AddressAdded, CustomerRegistered
from ordering.domain import ordering


def normalize_address(address):
    """Canonical form of an address line for storage and comparison."""
    return (address or "").strip()


@ordering.value_object(part_of="Customer")
class Profile:
    """Optional personal details supplied with the customer's first order."""

    first_name = String(max_length=100)
    last_name = String(max_length=100)
    phone = String(max_length=20)


@ordering.entity(part_of="Customer")
class Address:
    """A delivery address line the customer has ordered to."""

    line = String(required=True, max_length=500)


@ordering.aggregate
class Customer:
    email = String(identifier=True, max_length=254)
    profile = ValueObject(Profile)
    addresses = HasMany(Address)
    registered_at = DateTime(default=lambda: datetime.now(UTC))

    @invariant.post
    def email_must_be_well_formed(self):
        email = self.email or ""
        local_part, _, domain_part = email.partition("@")
        if (
            any(ch.isspace() for ch in email)
            or email.count("@") != 1
            or not local_part
            or "." not in domain_part
            or domain_part.startswith(".")
            or domain_part.endswith(".")
        ):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @invariant.post
    def addresses_must_be_distinct(self):
        lines = [address.line for address in self.addresses]
        if len(lines) != len(set(lines)):
            raise ValidationError({"addresses": ["Addresses must be distinct"]})

    @classmethod
    def register(cls, email, address, first_name=None, last_name=None, phone=None):
        """Register a customer whose first order ships to ``address``."""
        profile = None
        if first_name or last_name or phone:
            profile = Profile(first_name=first_name, last_name=last_name, phone=phone)

        now = datetime.now(UTC)
        customer = cls(email=email, profile=profile, registered_at=now)
        customer.raise_(
            CustomerRegistered(
                customer_email=email,
                first_name=first_name,
                last_name=last_name,
                registered_at=now,
            )
        )
        customer.add_address(address)
        return customer

    @property
    def address_lines(self):
        return [address.line for address in self.addresses]

    def has_address(self, address):
        return normalize_address(address) in self.address_lines

    def add_address(self, address):
        """Record ``address`` unless it is already known.

        Returns the new Address entity, or None when the address was already
        recorded.
        """
        line = normalize_address(address)
        if not line:
            raise ValidationError({"address": ["Address cannot be blank"]})
        if line in self.address_lines:
            return None

        entry = Address(line=line)
        self.add_addresses(entry)
        self.raise_(
            AddressAdded(
                customer_email=self.email,
                address_id=str(entry.id),
                line=line,
            )
        )
        return entry
