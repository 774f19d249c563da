# src/catalog/repositories/product_repository.py
from __future__ import annotations

import threading
from collections.abc import Iterable

from catalog.core.config import IdPolicy
from catalog.domain.models import Product, ProductCreate
from catalog.domain.ports import ProductNotFoundError, ProductStorePort


class InMemoryProductRepository(ProductStorePort):
    """
    In-memory product store.

    All records live in one ordered list guarded by a single lock. Every
    operation holds the lock for its whole duration and never suspends, so
    no caller observes a partially applied mutation. All operations scan
    the list, which is fine at catalog scale.

    Products are frozen models; handing them out of the critical section
    does not expose mutable state.
    """

    def __init__(
        self,
        products: Iterable[Product] = (),
        id_policy: IdPolicy = IdPolicy.MONOTONIC,
    ) -> None:
        self._lock = threading.Lock()
        self._products: list[Product] = []
        self._id_policy = id_policy
        # Highest id ever stored, only consulted by the monotonic policy
        self._high_water = 0
        for product in products:
            if self._index_of(product.id) is not None:
                raise ValueError(f"Duplicate product id {product.id} in initial catalog")
            self._products.append(product)
            self._high_water = max(self._high_water, product.id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def list(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def find_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            index = self._index_of(product_id)
            return None if index is None else self._products[index]

    def get(self, product_id: int) -> Product:
        product = self.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def insert(self, candidate: ProductCreate) -> Product:
        with self._lock:
            product = candidate.to_product(self._next_id())
            self._products.append(product)
            self._high_water = max(self._high_water, product.id)
            return product

    def replace(self, candidate: Product) -> Product:
        with self._lock:
            index = self._index_of(candidate.id)
            if index is None:
                raise ProductNotFoundError(candidate.id)
            self._products[index] = candidate
            return candidate

    def delete(self, product_id: int) -> None:
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                raise ProductNotFoundError(product_id)
            del self._products[index]

    # Callers must hold self._lock for the helpers below.

    def _index_of(self, product_id: int) -> int | None:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None

    def _next_id(self) -> int:
        if self._id_policy is IdPolicy.MONOTONIC:
            return self._high_water + 1

        # Count + 1, stepping past ids that are still taken after deletions
        candidate = len(self._products) + 1
        taken = {p.id for p in self._products}
        while candidate in taken:
            candidate += 1
        return candidate
