"""Application service: Update Order Status use case."""

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager

from retailops.domain.exceptions import EntityNotFoundError
from retailops.domain.model.order import Order, OrderStatus
from retailops.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._lock = lock or threading.RLock()

    def handle(self, order_id: str, status: str) -> Order:
        """Set any recognised status.

        This is a generic pass-through: it does not restrict transitions
        and never touches stock. Use the cancel use case to cancel with
        stock restoration.
        """
        # Serialised with cancel so a status change cannot land between
        # its cancellable check and the final transition
        with self._lock:
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order not found")

            new_status = OrderStatus.parse(status)
            previous = order.status
            order.update_status(new_status)
            self._order_repo.save(order)

        logger.info(
            "Order %s status %s -> %s",
            order.order_number, previous.value, new_status.value,
        )
        return order
