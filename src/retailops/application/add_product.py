"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from typing import Any

from retailops.domain.model.product import Product
from retailops.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str | None,
        price: Any,
        stock: Any,
        description: str | None = None,
        category: str | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        product = Product.create(
            name=name,
            price=price,
            stock=stock,
            description=description,
            category=category,
        )
        self._product_repo.save(product)
        logger.info("Product %s '%s' added at %s", product.id, product.name, product.price)
        return product
