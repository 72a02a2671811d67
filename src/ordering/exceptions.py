"""Ordering failures, grouped by the kind of problem they report.

Validation failures mean the request itself cannot be honoured, not-found
failures mean a referenced record is absent, and persistence failures mean
the store could not complete an operation.
"""


class OrderingError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(OrderingError):
    """The request cannot be honoured as submitted."""


class OrderValidationError(ValidationError):
    """An order references a store or products the catalogue does not know."""

    def __init__(self, message: str, unmatched: list | None = None):
        self.unmatched = list(unmatched or [])
        super().__init__(message)


class NotFoundError(OrderingError):
    pass


class OrderNotFound(NotFoundError):
    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


class CustomerNotFound(NotFoundError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Customer {email} not found")


class PersistenceError(OrderingError):
    """A storage operation failed."""


__all__ = [
    "CustomerNotFound",
    "NotFoundError",
    "OrderNotFound",
    "OrderValidationError",
    "OrderingError",
    "PersistenceError",
    "ValidationError",
]
