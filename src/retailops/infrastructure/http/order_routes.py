"""Order endpoints: ``/api/orders``."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from retailops.application.dto import OrderFilter, OrderItemSpec
from retailops.domain.exceptions import ValidationError
from retailops.infrastructure.bootstrap import Container
from retailops.infrastructure.http.dependencies import get_container
from retailops.infrastructure.http.schemas import (
    OrderCreateRequest,
    OrderOut,
    OrderStatsOut,
    StatusUpdateRequest,
    envelope,
)

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("")
def list_orders(
    order_status: str | None = Query(None, alias="status"),
    customer_email: str | None = Query(None, alias="customerEmail"),
    container: Container = Depends(get_container),
) -> dict:
    orders = container.list_orders.handle(
        OrderFilter(status=order_status, customer_email=customer_email)
    )
    return envelope([OrderOut.from_domain(o) for o in orders], count=len(orders))


# Declared before /{order_id} so "stats" is not taken for an id
@router.get("/stats")
def order_stats(container: Container = Depends(get_container)) -> dict:
    return envelope(OrderStatsOut.from_dto(container.order_stats.handle()))


@router.get("/{order_id}")
def get_order(order_id: str, container: Container = Depends(get_container)) -> dict:
    return envelope(OrderOut.from_domain(container.show_order.handle(order_id)))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(
    body: OrderCreateRequest,
    container: Container = Depends(get_container),
) -> dict:
    specs = None
    if body.items is not None:
        specs = [OrderItemSpec(product_id=i.product_id, quantity=i.quantity) for i in body.items]
    order = container.create_order.handle(
        customer_name=body.customer_name,
        customer_email=body.customer_email,
        item_specs=specs,
    )
    return envelope(OrderOut.from_domain(order))


@router.patch("/{order_id}/status")
def update_order_status(
    order_id: str,
    body: StatusUpdateRequest,
    container: Container = Depends(get_container),
) -> dict:
    if not body.status:
        raise ValidationError("Status is required")
    order = container.update_order_status.handle(order_id, body.status)
    return envelope(OrderOut.from_domain(order))


@router.post("/{order_id}/cancel")
def cancel_order(order_id: str, container: Container = Depends(get_container)) -> dict:
    return envelope(OrderOut.from_domain(container.cancel_order.handle(order_id)))
