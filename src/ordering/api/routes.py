"""FastAPI routes for the Ordering domain.

Routes are declared in the ``ROUTES`` table and registered on ``router``.
Each handler wraps its work in a single catch-all that hands failures to
``failure_response``.
"""

import json
from typing import Any, NamedTuple

from catalogue.loading import get_catalogue
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from ordering.api.errors import failure_response
from ordering.api.mappers import map_customer, map_order, map_order_summaries, map_stores
from ordering.api.schemas import (
    CreateOrderResponse,
    CustomerResponse,
    ErrorResponse,
    OrderResponse,
    OrderSummaryResponse,
    SchemaError,
    StoreResponse,
    parse_create_order,
)
from ordering.customer.reconciliation import get_customer
from ordering.order.creation import CreateOrder
from ordering.order.queries import get_order, list_customer_orders, list_orders


def _json(status_code: int, payload: Any) -> JSONResponse:
    if isinstance(payload, list):
        content = [entry.model_dump(mode="json") for entry in payload]
    else:
        content = payload.model_dump(mode="json")
    return JSONResponse(status_code=status_code, content=content)


# ---------------------------------------------------------------------------
# Order handlers
# ---------------------------------------------------------------------------
async def get_orders() -> JSONResponse:
    try:
        return _json(200, map_order_summaries(list_orders()))
    except Exception as exc:
        return failure_response("getOrders", "There is an error while getting all orders", "Can't get orders", exc)


async def get_order_by_id(order_id: str) -> JSONResponse:
    try:
        return _json(200, map_order(get_order(order_id)))
    except Exception as exc:
        return failure_response("getOrderById", "There is an error while getting order by id", "Can't get order", exc)


async def create_order(request: Request) -> JSONResponse:
    try:
        body = parse_create_order(await request.body())
        if isinstance(body, SchemaError):
            return failure_response(
                "createOrder", "There is an error while creating order", "Order can't be created", body
            )

        command = CreateOrder(
            store=body.store,
            address=body.address,
            items=json.dumps([item.model_dump() for item in body.items]),
            customer_email=body.customer.email,
            first_name=body.customer.first_name,
            last_name=body.customer.last_name,
            phone=body.customer.phone,
        )
        order_id = current_domain.process(command, asynchronous=False)
        return _json(201, CreateOrderResponse(order=map_order(get_order(order_id))))
    except Exception as exc:
        return failure_response("createOrder", "There is an error while creating order", "Order can't be created", exc)


# ---------------------------------------------------------------------------
# Customer and catalogue handlers
# ---------------------------------------------------------------------------
async def get_customer_by_email(email: str) -> JSONResponse:
    try:
        return _json(200, map_customer(get_customer(email)))
    except Exception as exc:
        return failure_response("getCustomer", "There is an error while getting customer", "Can't get customer", exc)


async def get_customer_orders(email: str) -> JSONResponse:
    try:
        return _json(200, map_order_summaries(list_customer_orders(email)))
    except Exception as exc:
        return failure_response(
            "getCustomerOrders", "There is an error while getting customer orders", "Can't get orders", exc
        )


async def get_stores() -> JSONResponse:
    try:
        return _json(200, map_stores(get_catalogue()))
    except Exception as exc:
        return failure_response("getStores", "There is an error while getting stores", "Can't get stores", exc)


# ---------------------------------------------------------------------------
# Route table
# ---------------------------------------------------------------------------
class Route(NamedTuple):
    method: str
    path: str
    endpoint: Any
    status_code: int
    response_model: Any


ROUTES = [
    Route("GET", "/api/orders", get_orders, 200, list[OrderSummaryResponse]),
    Route("GET", "/api/order/{order_id}", get_order_by_id, 200, OrderResponse),
    Route("POST", "/api/order/create", create_order, 201, CreateOrderResponse),
    Route("GET", "/api/customer/{email}", get_customer_by_email, 200, CustomerResponse),
    Route("GET", "/api/customer/{email}/orders", get_customer_orders, 200, list[OrderSummaryResponse]),
    Route("GET", "/api/stores", get_stores, 200, list[StoreResponse]),
]

router = APIRouter(tags=["orders"])

for route in ROUTES:
    router.add_api_route(
        route.path,
        route.endpoint,
        methods=[route.method],
        status_code=route.status_code,
        response_model=route.response_model,
        responses={500: {"model": ErrorResponse}},
    )
