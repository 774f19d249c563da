# src/catalog/services/product_service.py
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from catalog.core.metrics import STORE_OPERATIONS
from catalog.domain.models import Product, ProductCreate
from catalog.domain.ports import ProductNotFoundError, ProductStorePort

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProductService:
    def __init__(self, repository: ProductStorePort) -> None:
        self._repo = repository

    def list_products(self) -> list[Product]:
        products = self._repo.list()
        STORE_OPERATIONS.labels(operation="list", outcome="ok").inc()
        return products

    def get_product(self, product_id: int) -> Product:
        return self._run("get", product_id, lambda: self._repo.get(product_id))

    def create_product(self, payload: ProductCreate) -> Product:
        product = self._repo.insert(payload)
        STORE_OPERATIONS.labels(operation="insert", outcome="ok").inc()
        logger.info("Created product %d (%s)", product.id, product.name)
        return product

    def update_product(self, payload: Product) -> Product:
        product = self._run("replace", payload.id, lambda: self._repo.replace(payload))
        logger.info("Replaced product %d", product.id)
        return product

    def delete_product(self, product_id: int) -> None:
        self._run("delete", product_id, lambda: self._repo.delete(product_id))
        logger.info("Deleted product %d", product_id)

    def _run(self, operation: str, product_id: int, call: Callable[[], T]) -> T:
        try:
            result = call()
        except ProductNotFoundError:
            STORE_OPERATIONS.labels(operation=operation, outcome="not_found").inc()
            logger.warning("%s: product %d not found", operation, product_id)
            raise
        STORE_OPERATIONS.labels(operation=operation, outcome="ok").inc()
        return result
