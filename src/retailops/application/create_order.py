"""Application service: Create Order use case.

Orchestrates the flow between repositories, the stock service and the
Order aggregate. This is the only place that coordinates multiple
aggregates on the way in (Product lookup + stock deduction + Order
creation).
"""

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager

from retailops.application.dto import OrderItemSpec
from retailops.domain.exceptions import ValidationError
from retailops.domain.model.order import Order, OrderLineItem, validate_customer
from retailops.domain.model.value_objects import Quantity
from retailops.domain.repository.order_repository import OrderRepository
from retailops.domain.repository.product_repository import ProductRepository
from retailops.domain.service.stock_service import StockService, total_quantities

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._lock = lock or threading.RLock()

    def handle(
        self,
        customer_name: str | None,
        customer_email: str | None,
        item_specs: list[OrderItemSpec] | None,
    ) -> Order:
        """Place a new order.

        Steps:
        1. Validate the request structure, collecting every problem.
        2. Resolve every product and check stock for every line
           (fail before anything is touched).
        3. Build OrderLineItems with *current* names and prices (snapshot).
        4. Deduct stock and persist the order.

        Steps 2-4 run under the catalog lock so no concurrent order can
        consume the stock between the check and the deduction.
        """
        self._validate(customer_name, customer_email, item_specs)

        with self._lock:
            svc = StockService(self._product_repo)
            wanted = total_quantities([(s.product_id, s.quantity) for s in item_specs])
            products = {p.id: p for p in svc.check_availability(wanted)}

            line_items = [
                OrderLineItem(
                    product_id=spec.product_id,
                    product_name=products[spec.product_id].name,
                    quantity=Quantity(spec.quantity),
                    unit_price=products[spec.product_id].price,  # <-- price snapshot
                )
                for spec in item_specs
            ]
            order = Order.create(customer_name, customer_email, line_items)

            svc.consume_for_order(order)
            self._order_repo.save(order)

        logger.info(
            "Order %s placed by %s: %d line(s), total %s",
            order.order_number, order.customer_email, len(order.items), order.total,
        )
        return order

    @staticmethod
    def _validate(
        customer_name: str | None,
        customer_email: str | None,
        item_specs: list[OrderItemSpec] | None,
    ) -> None:
        errors = validate_customer(customer_name, customer_email)

        if not item_specs:
            errors.append("Order must contain at least one item")
        else:
            for n, spec in enumerate(item_specs, start=1):
                if not isinstance(spec.product_id, str) or not spec.product_id:
                    errors.append(f"Item {n}: productId is required")
                qty = spec.quantity
                if isinstance(qty, bool) or not isinstance(qty, int) or qty <= 0:
                    errors.append(f"Item {n}: quantity must be a positive integer")

        if errors:
            raise ValidationError(errors)
