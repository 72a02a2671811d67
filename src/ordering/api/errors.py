"""Request-boundary error handling for the Ordering API.

Every route funnels failures through ``failure_response``: the error is
classified into an ``ErrorKind``, logged with its operation tag, and turned
into a JSON body whose HTTP status comes from ``ERROR_STATUS``. All kinds
currently answer 500, which is the contract existing clients rely on.
"""

from enum import Enum

from catalogue.store import StoreNotFound
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError
from protean.exceptions import ValidationError as DomainValidationError

from ordering.api.schemas import ErrorResponse, SchemaError
from ordering.exceptions import NotFoundError, PersistenceError, ValidationError
from ordering.utils.logging import get_logger

logger = get_logger(__name__)

TAG = "ecardshop:order"


class ErrorKind(Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"


ERROR_STATUS = {
    ErrorKind.VALIDATION: 500,
    ErrorKind.NOT_FOUND: 500,
    ErrorKind.PERSISTENCE: 500,
}

_VALIDATION_ERRORS = (ValidationError, DomainValidationError, SchemaError)
_NOT_FOUND_ERRORS = (NotFoundError, ObjectNotFoundError, StoreNotFound)


def classify(error) -> tuple[ErrorKind, object]:
    """Return the error's kind, and the error as it should be reported.

    Anything that is neither a validation nor a not-found failure escaped the
    storage layer, so it is reported as a ``PersistenceError`` chained to the
    original exception.
    """
    if isinstance(error, _VALIDATION_ERRORS):
        return ErrorKind.VALIDATION, error
    if isinstance(error, _NOT_FOUND_ERRORS):
        return ErrorKind.NOT_FOUND, error
    if isinstance(error, PersistenceError):
        return ErrorKind.PERSISTENCE, error

    wrapped = PersistenceError(str(error) or error.__class__.__name__)
    wrapped.__cause__ = error
    return ErrorKind.PERSISTENCE, wrapped


def failure_response(operation: str, message: str, user_message: str, error) -> JSONResponse:
    kind, reported = classify(error)
    status_code = ERROR_STATUS[kind]

    details = {}
    if isinstance(reported, SchemaError):
        details["details"] = reported.details
    elif getattr(reported, "unmatched", None):
        details["unmatched"] = reported.unmatched

    logger.error(
        message,
        tag=f"{TAG}:{operation}",
        error=f"{reported.__class__.__name__}: {reported}",
        kind=kind.value,
        status=status_code,
        exc_info=reported.__cause__ if kind is ErrorKind.PERSISTENCE else None,
        **details,
    )
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=user_message, status=status_code).model_dump(),
    )
