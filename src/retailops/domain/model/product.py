"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock is consumed and restocked, products are added to and
removed from the catalog. Orders only ever read a snapshot (name, price).
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from retailops.domain.exceptions import InsufficientStockError, ValidationError
from retailops.domain.model.value_objects import Money


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``price`` is always greater than zero
    - ``stock`` is never negative
    """

    id: str
    name: str
    price: Money
    stock: int
    description: str = ""
    category: str = ""
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str | None,
        price: Any,
        stock: Any,
        description: str | None = None,
        category: str | None = None,
    ) -> Product:
        """Create a new product, collecting every violated rule."""
        errors = _name_errors(name) + _price_errors(price) + _stock_errors(stock)
        if errors:
            raise ValidationError(errors)

        now = _utcnow()
        return Product(
            id=str(uuid.uuid4()),
            name=name.strip(),
            price=Money.of(price),
            stock=stock,
            description=description or "",
            category=category or "",
            created_at=now,
            updated_at=now,
        )

    # --- Mutations ------------------------------------------------------------

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        price: Any = None,
        stock: Any = None,
        category: str | None = None,
    ) -> None:
        """Overwrite the supplied fields; ``None`` means "not supplied".

        Supplied fields go through the creation rules first, so a failed
        update leaves the product untouched.
        """
        errors: list[str] = []
        if name is not None:
            errors += _name_errors(name)
        if price is not None:
            errors += _price_errors(price)
        if stock is not None:
            errors += _stock_errors(stock)
        if errors:
            raise ValidationError(errors)

        if name is not None:
            self.name = name.strip()
        if description is not None:
            self.description = description
        if price is not None:
            self.price = Money.of(price)
        if stock is not None:
            self.stock = stock
        if category is not None:
            self.category = category
        self.touch()

    def adjust_stock(self, delta: int) -> None:
        """Apply a signed stock delta, rejecting any that would go negative."""
        if self.stock + delta < 0:
            raise InsufficientStockError(
                f"Insufficient stock for product {self.name} "
                f"(requested {-delta}, have {self.stock})"
            )
        self.stock += delta
        self.touch()

    def has_sufficient_stock(self, quantity: int) -> bool:
        return self.stock >= quantity

    def touch(self) -> None:
        self.updated_at = _utcnow()


# ---------------------------------------------------------------------------
# Field rules, shared by create() and update()
# ---------------------------------------------------------------------------


def _name_errors(name: Any) -> list[str]:
    if not isinstance(name, str) or not name.strip():
        return ["Product name is required"]
    return []


def _price_errors(price: Any) -> list[str]:
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        return ["Price must be a positive number"]
    if not math.isfinite(price) or price <= 0:
        return ["Price must be a positive number"]
    return []


def _stock_errors(stock: Any) -> list[str]:
    if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
        return ["Stock must be a non-negative integer"]
    return []
