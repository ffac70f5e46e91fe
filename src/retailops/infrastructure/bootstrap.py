"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Each call builds an independent set of stores and handlers, so the HTTP
app and the tests never share global state.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from retailops.application.add_product import AddProductHandler
from retailops.application.adjust_stock import AdjustStockHandler
from retailops.application.cancel_order import CancelOrderHandler
from retailops.application.create_order import CreateOrderHandler
from retailops.application.delete_product import DeleteProductHandler
from retailops.application.order_stats import OrderStatsHandler
from retailops.application.show_order import ListOrdersHandler, ShowOrderHandler
from retailops.application.show_product import ListProductsHandler, ShowProductHandler
from retailops.application.update_order_status import UpdateOrderStatusHandler
from retailops.application.update_product import UpdateProductHandler
from retailops.domain.repository.order_repository import OrderRepository
from retailops.domain.repository.product_repository import ProductRepository
from retailops.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from retailops.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)
from retailops.infrastructure.persistence.seed import seed_sample_products


@dataclass
class Container:
    """Repositories plus one handler per use case."""

    product_repo: ProductRepository
    order_repo: OrderRepository
    # Guards every read-check-write sequence on product stock
    catalog_lock: threading.RLock = field(default_factory=threading.RLock)

    def __post_init__(self) -> None:
        products, orders, lock = self.product_repo, self.order_repo, self.catalog_lock

        self.list_products = ListProductsHandler(products)
        self.show_product = ShowProductHandler(products)
        self.add_product = AddProductHandler(products)
        self.update_product = UpdateProductHandler(products, lock)
        self.delete_product = DeleteProductHandler(products, lock)
        self.adjust_stock = AdjustStockHandler(products, lock)

        self.list_orders = ListOrdersHandler(orders)
        self.show_order = ShowOrderHandler(orders)
        self.create_order = CreateOrderHandler(orders, products, lock)
        self.update_order_status = UpdateOrderStatusHandler(orders, lock)
        self.cancel_order = CancelOrderHandler(orders, products, lock)
        self.order_stats = OrderStatsHandler(orders)


def build_container(seed: bool = True) -> Container:
    product_repo = InMemoryProductRepository()
    if seed:
        seed_sample_products(product_repo)
    return Container(product_repo=product_repo, order_repo=InMemoryOrderRepository())
