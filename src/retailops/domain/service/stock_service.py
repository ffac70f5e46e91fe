"""Domain service: Stock.

Coordinates the cross-aggregate operations of consuming and restoring
product stock for an order. It lives in the domain layer because the
all-or-nothing rule is a core business rule, not just orchestration.

The two-phase approach (validate-then-mutate) ensures stock is never left
partially decremented when a later line of the same order fails.
"""

from __future__ import annotations

import logging

from retailops.domain.exceptions import EntityNotFoundError, InsufficientStockError
from retailops.domain.model.order import Order
from retailops.domain.model.product import Product
from retailops.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StockService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def has_sufficient_stock(self, product_id: str, quantity: int) -> bool:
        product = self._require(product_id)
        return product.has_sufficient_stock(quantity)

    def adjust_stock(self, product_id: str, delta: int) -> Product:
        """Apply a signed delta to one product's stock."""
        product = self._require(product_id)
        try:
            product.adjust_stock(delta)
        except InsufficientStockError:
            logger.warning(
                "Rejected stock adjustment of %+d for %s (stock %d)",
                delta, product.id, product.stock,
            )
            raise
        self._product_repo.save(product)
        return product

    def check_availability(self, quantities: dict[str, int]) -> list[Product]:
        """Phase 1: make sure every requested quantity is in stock.

        ``quantities`` maps product id to the total units wanted. Fails
        before any mutation; returns the products in request order.
        """
        products: list[Product] = []
        for product_id, qty in quantities.items():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product {product_id} not found")
            products.append(product)

        for product, qty in zip(products, quantities.values()):
            if not product.has_sufficient_stock(qty):
                raise InsufficientStockError(
                    f"Insufficient stock for product {product.name}"
                )
        return products

    def consume_for_order(self, order: Order) -> None:
        """Phase 2: deduct every line item's quantity.

        Availability must have been checked first, under the same lock.
        """
        for line in order.items:
            self.adjust_stock(line.product_id, -line.quantity.value)

    def restore_for_order(self, order: Order) -> None:
        """Give every line item's quantity back to its product.

        Lines whose product has since been removed from the catalog have
        nothing to restore to and are skipped.
        """
        for line in order.items:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                logger.warning(
                    "Order %s: product %s no longer exists, %d units not restored",
                    order.order_number, line.product_id, line.quantity.value,
                )
                continue
            product.adjust_stock(line.quantity.value)
            self._product_repo.save(product)

    # --- Internal helpers -----------------------------------------------------

    def _require(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product


def total_quantities(order_lines: list[tuple[str, int]]) -> dict[str, int]:
    """Sum requested quantities per product, keeping first-seen order."""
    totals: dict[str, int] = {}
    for product_id, qty in order_lines:
        totals[product_id] = totals.get(product_id, 0) + qty
    return totals
