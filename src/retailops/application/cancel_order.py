"""Application service: Cancel Order use case.

Restores the stock of every line item before cancelling. Completed
orders cannot be cancelled, and an order is never cancelled twice, so
stock is never restored twice.
"""

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager

from retailops.domain.exceptions import EntityNotFoundError
from retailops.domain.model.order import Order
from retailops.domain.repository.order_repository import OrderRepository
from retailops.domain.repository.product_repository import ProductRepository
from retailops.domain.service.stock_service import StockService

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._lock = lock or threading.RLock()

    def handle(self, order_id: str) -> Order:
        with self._lock:
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order not found")

            # Check first so a rejected cancel leaves stock untouched
            order.ensure_cancellable()

            svc = StockService(self._product_repo)
            svc.restore_for_order(order)

            order.cancel()
            self._order_repo.save(order)

        logger.info("Order %s cancelled, stock restored", order.order_number)
        return order
