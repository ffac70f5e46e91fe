"""Application service: Delete Product use case."""

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager

from retailops.domain.exceptions import EntityNotFoundError
from retailops.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._lock = lock or threading.RLock()

    def handle(self, product_id: str) -> None:
        with self._lock:
            if not self._product_repo.delete(product_id):
                raise EntityNotFoundError("Product not found")
        logger.info("Product %s deleted", product_id)
