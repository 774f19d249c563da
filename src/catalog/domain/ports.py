# src/catalog/domain/ports.py
from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.models import Product, ProductCreate


class ProductStorePort(ABC):
    """
    Abstract interface of the product store.
    Every operation is atomic with respect to all others.
    """

    @abstractmethod
    def list(self) -> list[Product]:
        """Returns a snapshot of all products in insertion order."""
        ...

    @abstractmethod
    def get(self, product_id: int) -> Product:
        """
        Returns the product with the given id.

        Raises:
            ProductNotFoundError: If no product has that id.
        """
        ...

    @abstractmethod
    def insert(self, candidate: ProductCreate) -> Product:
        """Assigns a fresh id to the candidate, appends it and returns the stored product."""
        ...

    @abstractmethod
    def replace(self, candidate: Product) -> Product:
        """
        Replaces the product whose id matches ``candidate.id`` in place.

        Raises:
            ProductNotFoundError: If no product has that id.
        """
        ...

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """
        Removes the product with the given id.

        Raises:
            ProductNotFoundError: If no product has that id.
        """
        ...


# ---------------------------------------------------------------------------
# Custom Domain Exceptions
# ---------------------------------------------------------------------------


class ProductNotFoundError(Exception):
    def __init__(self, product_id: int):
        super().__init__(f"Product '{product_id}' not found")
        self.product_id = product_id


class MalformedPayloadError(Exception):
    def __init__(self, detail: str):
        super().__init__(f"Malformed product payload: {detail}")
        self.detail = detail


class PayloadTooLargeError(Exception):
    def __init__(self, limit: int):
        super().__init__(f"Payload exceeds the maximum size of {limit} bytes")
        self.limit = limit


class TransportError(Exception):
    def __init__(self, detail: str):
        super().__init__(f"Error while reading request body: {detail}")
        self.detail = detail
