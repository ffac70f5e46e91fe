"""Application service: Update Product use case."""

from __future__ import annotations

import threading
from contextlib import AbstractContextManager

from retailops.application.dto import ProductUpdate
from retailops.domain.exceptions import EntityNotFoundError
from retailops.domain.model.product import Product
from retailops.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._lock = lock or threading.RLock()

    def handle(self, product_id: str, update: ProductUpdate) -> Product:
        """Overwrite the supplied fields of a product.

        Price changes do NOT affect existing orders; they captured a
        price snapshot at creation time.
        """
        # stock may be among the fields, so this shares the catalog lock
        with self._lock:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product not found")

            product.update(
                name=update.name,
                description=update.description,
                price=update.price,
                stock=update.stock,
                category=update.category,
            )
            self._product_repo.save(product)
            return product
