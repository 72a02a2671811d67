"""Pydantic request/response schemas for the Ordering API.

These are external contracts, separate from the internal Protean commands.
Request bodies are checked with ``parse_create_order``, which returns either
a validated request or a ``SchemaError`` describing what is wrong.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class ItemSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    unit: str = Field(..., min_length=1, max_length=50)
    price: float = Field(..., ge=0)
    quantity: int = Field(1, ge=1)


class CustomerSchema(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=20)


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "store": "Downtown",
                    "address": "12 Elm St",
                    "items": [{"name": "Bread", "unit": "loaf", "price": 2.5, "quantity": 2}],
                    "customer": {
                        "email": "a@x.com",
                        "first_name": "Ada",
                        "last_name": "Lovelace",
                        "phone": "+1-555-0100",
                    },
                }
            ]
        }
    }

    store: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=500)
    items: list[ItemSchema] = Field(..., min_length=1)
    customer: CustomerSchema


@dataclass(frozen=True)
class SchemaError:
    """A request body that failed schema validation."""

    message: str
    details: list[dict] = field(default_factory=list)

    def __str__(self):
        fields = ", ".join(detail["field"] for detail in self.details if detail.get("field"))
        return f"{self.message}: {fields}" if fields else self.message


def parse_create_order(raw: bytes | str | Mapping[str, Any]) -> CreateOrderRequest | SchemaError:
    """Validate an order creation body, given as raw JSON or an already decoded mapping."""
    try:
        if isinstance(raw, bytes | str):
            return CreateOrderRequest.model_validate_json(raw)
        return CreateOrderRequest.model_validate(raw)
    except PydanticValidationError as exc:
        return SchemaError(
            message="Invalid order request",
            details=[
                {
                    "field": ".".join(str(loc) for loc in error["loc"]),
                    "message": error["msg"],
                    "type": error["type"],
                }
                for error in exc.errors()
            ],
        )


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderItemResponse(BaseModel):
    name: str
    unit: str
    price: float
    quantity: int


class OrderSummaryResponse(BaseModel):
    id: str
    store: str
    customer_email: str
    address: str
    items: list[OrderItemResponse]
    total: float
    status: str
    created_at: datetime | None = None


class OrderResponse(OrderSummaryResponse):
    updated_at: datetime | None = None


class CreateOrderResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "message": "Order is created successfully",
                    "status": 201,
                    "order": {
                        "id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                        "store": "Downtown",
                        "customer_email": "a@x.com",
                        "address": "12 Elm St",
                        "items": [{"name": "Bread", "unit": "loaf", "price": 2.5, "quantity": 2}],
                        "total": 5.0,
                        "status": "Created",
                    },
                }
            ]
        }
    }

    message: str = "Order is created successfully"
    status: int = 201
    order: OrderResponse


class CustomerResponse(BaseModel):
    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    addresses: list[str]
    registered_at: datetime | None = None


class ProductResponse(BaseModel):
    name: str
    unit: str
    price: float


class StoreResponse(BaseModel):
    name: str
    products: list[ProductResponse]


class ErrorResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"message": "Order can't be created", "status": 500}]}}

    message: str
    status: int = 500
