"""Application service: Show/List Products use cases (queries)."""

from __future__ import annotations

from retailops.application.dto import ProductFilter
from retailops.domain.exceptions import EntityNotFoundError
from retailops.domain.model.product import Product
from retailops.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, criteria: ProductFilter | None = None) -> list[Product]:
        """Every product matching all supplied filter fields, in catalog order."""
        criteria = criteria or ProductFilter()
        products = self._product_repo.list_all()

        if criteria.category is not None:
            products = [p for p in products if p.category == criteria.category]
        if criteria.min_price is not None:
            products = [p for p in products if p.price.amount >= criteria.min_price]
        if criteria.max_price is not None:
            products = [p for p in products if p.price.amount <= criteria.max_price]

        return products
