"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry requests and query results between the HTTP/CLI boundary and
the application layer without exposing repositories to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str | None
    quantity: Any


@dataclass(frozen=True)
class ProductUpdate:
    """Input: a partial product update.

    ``None`` means "field not supplied"; any other value, including an
    empty description, is applied.
    """

    name: str | None = None
    description: str | None = None
    price: Any = None
    stock: Any = None
    category: str | None = None


@dataclass(frozen=True)
class ProductFilter:
    category: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None


@dataclass(frozen=True)
class OrderFilter:
    status: str | None = None
    customer_email: str | None = None


@dataclass(frozen=True)
class OrderStats:
    """Output: order counts and revenue for the dashboard."""

    total_orders: int
    total_revenue: Decimal
    orders_by_status: dict[str, int] = field(default_factory=dict)
