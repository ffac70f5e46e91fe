"""Application service: Order Statistics use case (query)."""

from __future__ import annotations

from retailops.application.dto import OrderStats
from retailops.domain.model.order import OrderStatus
from retailops.domain.model.value_objects import Money
from retailops.domain.repository.order_repository import OrderRepository


class OrderStatsHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> OrderStats:
        orders = self._order_repo.list_all()

        revenue = Money.zero()
        for order in orders:
            if order.status != OrderStatus.CANCELLED:
                revenue = revenue + order.total

        by_status = {status.value: 0 for status in OrderStatus}
        for order in orders:
            by_status[order.status.value] += 1

        return OrderStats(
            total_orders=len(orders),
            total_revenue=revenue.rounded(),
            orders_by_status=by_status,
        )
