"""Mapping of aggregates and catalogue entries to API response shapes."""

from ordering.api.schemas import (
    CustomerResponse,
    OrderItemResponse,
    OrderResponse,
    OrderSummaryResponse,
    ProductResponse,
    StoreResponse,
)


def _items(order):
    return [OrderItemResponse(**item.to_dict()) for item in order.items]


def map_order(order) -> OrderResponse:
    return OrderResponse(
        id=str(order.id),
        store=order.store,
        customer_email=order.customer_email,
        address=order.address,
        items=_items(order),
        total=order.total,
        status=order.status,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def map_order_summaries(orders) -> list[OrderSummaryResponse]:
    return [
        OrderSummaryResponse(
            id=str(order.id),
            store=order.store,
            customer_email=order.customer_email,
            address=order.address,
            items=_items(order),
            total=order.total,
            status=order.status,
            created_at=order.created_at,
        )
        for order in orders
    ]


def map_customer(customer) -> CustomerResponse:
    profile = customer.profile
    return CustomerResponse(
        email=customer.email,
        first_name=profile.first_name if profile else None,
        last_name=profile.last_name if profile else None,
        phone=profile.phone if profile else None,
        addresses=customer.address_lines,
        registered_at=customer.registered_at,
    )


def map_stores(catalogue) -> list[StoreResponse]:
    return [
        StoreResponse(
            name=store.name,
            products=[ProductResponse(**product.to_dict()) for product in store.products],
        )
        for store in catalogue.stores
    ]
