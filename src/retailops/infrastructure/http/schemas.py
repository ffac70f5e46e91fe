"""Request and response models for the HTTP API.

Request fields that carry business rules (names, prices, stock,
quantities) are typed ``Any`` and every field is optional. The raw JSON
value reaches the domain uncoerced, so ``"10"`` or ``true`` is rejected as
a price or stock and every violated rule is reported in one
ValidationError. JSON keys are camelCase.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from retailops.application.dto import OrderStats
from retailops.domain.model.order import Order, OrderLineItem
from retailops.domain.model.product import Product


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ProductCreateRequest(CamelModel):
    name: Any = None
    description: str | None = None
    price: Any = None
    stock: Any = None
    category: str | None = None


class ProductUpdateRequest(ProductCreateRequest):
    """Same fields as creation; only the ones present are applied."""


class StockAdjustRequest(CamelModel):
    delta: Any = None


class OrderItemRequest(CamelModel):
    product_id: Any = None
    quantity: Any = None


class OrderCreateRequest(CamelModel):
    customer_name: Any = None
    customer_email: Any = None
    items: list[OrderItemRequest] | None = None


class StatusUpdateRequest(CamelModel):
    status: str | None = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class ProductOut(CamelModel):
    id: str
    name: str
    description: str
    price: float
    stock: int
    category: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, product: Product) -> ProductOut:
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price.to_float(),
            stock=product.stock,
            category=product.category,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class OrderLineItemOut(CamelModel):
    product_id: str
    product_name: str
    quantity: int
    price: float

    @classmethod
    def from_domain(cls, item: OrderLineItem) -> OrderLineItemOut:
        return cls(
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity.value,
            price=item.unit_price.to_float(),
        )


class OrderOut(CamelModel):
    id: str
    order_number: str
    customer_name: str
    customer_email: str
    items: list[OrderLineItemOut]
    total_amount: float
    status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, order: Order) -> OrderOut:
        return cls(
            id=order.id,
            order_number=order.order_number,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            items=[OrderLineItemOut.from_domain(item) for item in order.items],
            total_amount=order.total.to_float(),
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class OrderStatsOut(CamelModel):
    total_orders: int
    total_revenue: float
    orders_by_status: dict[str, int]

    @classmethod
    def from_dto(cls, stats: OrderStats) -> OrderStatsOut:
        return cls(
            total_orders=stats.total_orders,
            total_revenue=float(stats.total_revenue),
            orders_by_status=stats.orders_by_status,
        )


def envelope(data: Any = None, count: int | None = None, message: str | None = None) -> dict:
    """The ``{success, data, count, message}`` shape every endpoint returns."""
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if count is not None:
        body["count"] = count
    if data is not None:
        body["data"] = _dump(data)
    return body


def _dump(data: Any) -> Any:
    if isinstance(data, list):
        return [_dump(item) for item in data]
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, mode="json")
    return data
