"""Tests for how failures are classified and reported at the HTTP boundary."""

import json

import pytest
from catalogue.store import StoreNotFound
from ordering.api.errors import ERROR_STATUS, ErrorKind, classify, failure_response
from ordering.api.schemas import SchemaError
from ordering.exceptions import (
    CustomerNotFound,
    OrderNotFound,
    OrderValidationError,
    PersistenceError,
)
from protean.exceptions import ObjectNotFoundError
from protean.exceptions import ValidationError as DomainValidationError


class TestErrorStatusTable:
    def test_every_kind_has_a_status(self):
        assert set(ERROR_STATUS) == set(ErrorKind)

    def test_every_kind_answers_500(self):
        assert set(ERROR_STATUS.values()) == {500}


class TestClassify:
    @pytest.mark.parametrize(
        "error",
        [
            OrderValidationError("bad"),
            DomainValidationError({"email": ["invalid"]}),
            SchemaError(message="Invalid order request"),
        ],
    )
    def test_validation_failures(self, error):
        assert classify(error) == (ErrorKind.VALIDATION, error)

    @pytest.mark.parametrize(
        "error",
        [OrderNotFound("o-1"), CustomerNotFound("a@x.com"), ObjectNotFoundError("gone"), StoreNotFound("Nowhere")],
    )
    def test_not_found_failures(self, error):
        assert classify(error) == (ErrorKind.NOT_FOUND, error)

    def test_persistence_error_is_reported_as_is(self):
        error = PersistenceError("disk full")
        assert classify(error) == (ErrorKind.PERSISTENCE, error)

    def test_unknown_error_is_wrapped_as_persistence(self):
        original = RuntimeError("connection refused")

        kind, reported = classify(original)

        assert kind is ErrorKind.PERSISTENCE
        assert isinstance(reported, PersistenceError)
        assert reported.message == "connection refused"
        assert reported.__cause__ is original


class TestFailureResponse:
    def test_body_carries_user_message_only(self):
        response = failure_response(
            "createOrder",
            "There is an error while creating order",
            "Order can't be created",
            OrderValidationError("These products aren't found in the selected store", unmatched=[{"name": "Milk"}]),
        )

        assert response.status_code == 500
        assert json.loads(response.body) == {"message": "Order can't be created", "status": 500}

    def test_unknown_error_still_answers_500(self):
        response = failure_response(
            "getOrders", "There is an error while getting all orders", "Can't get orders", KeyError("x")
        )

        assert response.status_code == 500
        assert json.loads(response.body)["message"] == "Can't get orders"
