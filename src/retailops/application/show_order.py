"""Application service: Show/List Orders use cases (queries)."""

from __future__ import annotations

from retailops.application.dto import OrderFilter
from retailops.domain.exceptions import EntityNotFoundError
from retailops.domain.model.order import Order
from retailops.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")
        return order


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, criteria: OrderFilter | None = None) -> list[Order]:
        """Orders with an exact status and/or an email containing the
        given text (case-insensitive)."""
        criteria = criteria or OrderFilter()
        orders = self._order_repo.list_all()

        if criteria.status:
            orders = [o for o in orders if o.status.value == criteria.status]
        if criteria.customer_email:
            needle = criteria.customer_email.lower()
            orders = [o for o in orders if needle in o.customer_email.lower()]

        return orders
