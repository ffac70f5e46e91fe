"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items. Line items hold
a price snapshot taken when the order was placed, so the order total is
frozen from that moment on.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from retailops.domain.exceptions import (
    InvalidStatusError,
    InvalidTransitionError,
    ValidationError,
)
from retailops.domain.model.value_objects import Money, Quantity


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: str) -> OrderStatus:
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidStatusError("Invalid order status") from exc


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product name and price at order-creation time.

    ``product_id`` is a weak reference: the product may later change
    price or be deleted without affecting this line.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders. It enforces the
    structural rules and stamps identity and order number. The
    ``__init__`` stays simple so tests can build orders in any status.
    """

    id: str
    order_number: str
    customer_name: str
    customer_email: str
    items: list[OrderLineItem]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        customer_email: str,
        items: list[OrderLineItem],
    ) -> Order:
        """Create a new pending order."""
        errors = validate_customer(customer_name, customer_email)
        if not items:
            errors.append("Order must contain at least one item")
        if errors:
            raise ValidationError(errors)

        now = _utcnow()
        order_id = str(uuid.uuid4())
        return Order(
            id=order_id,
            order_number=make_order_number(order_id, now),
            customer_name=customer_name.strip(),
            customer_email=customer_email.strip(),
            items=list(items),
            created_at=now,
            updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    def update_status(self, status: OrderStatus) -> None:
        """Move to any recognised status.

        Deliberately permissive: ``completed`` and ``cancelled`` are not
        terminal here and no stock is touched. Only ``cancel()`` guards
        its transition.
        """
        self.status = status
        self.updated_at = _utcnow()

    def ensure_cancellable(self) -> None:
        if self.status == OrderStatus.COMPLETED:
            raise InvalidTransitionError("Cannot cancel completed order")
        if self.status == OrderStatus.CANCELLED:
            raise InvalidTransitionError("Order is already cancelled")

    def cancel(self) -> None:
        """Transition PENDING|PROCESSING -> CANCELLED.

        Stock restoration must happen *before* calling this (coordinated by
        the application handler via the stock service).
        """
        self.ensure_cancellable()
        self.update_status(OrderStatus.CANCELLED)

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result


def validate_customer(customer_name: str | None, customer_email: str | None) -> list[str]:
    errors: list[str] = []
    if not isinstance(customer_name, str) or not customer_name.strip():
        errors.append("Customer name is required")
    if not isinstance(customer_email, str) or "@" not in customer_email:
        errors.append("Valid customer email is required")
    return errors


def make_order_number(order_id: str, created_at: datetime) -> str:
    """Human-readable order number: creation millis plus an identity suffix.

    The millisecond prefix alone collides for orders placed in the same
    tick; the suffix comes from the order's uuid.
    """
    millis = int(created_at.timestamp() * 1000)
    return f"ORD-{millis}-{order_id.replace('-', '')[:8].upper()}"
