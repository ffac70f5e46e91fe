"""Application service: Adjust Stock use case (restock or write-off)."""

from __future__ import annotations

import threading
from contextlib import AbstractContextManager

from retailops.domain.exceptions import ValidationError
from retailops.domain.model.product import Product
from retailops.domain.repository.product_repository import ProductRepository
from retailops.domain.service.stock_service import StockService


class AdjustStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._lock = lock or threading.RLock()

    def handle(self, product_id: str, delta: int) -> Product:
        """Apply a signed delta; negative deltas may not overdraw stock."""
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError("Stock delta must be an integer")

        with self._lock:
            return StockService(self._product_repo).adjust_stock(product_id, delta)
