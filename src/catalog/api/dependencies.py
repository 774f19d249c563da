# src/catalog/api/dependencies.py
from fastapi import Depends

from catalog.core.config import Settings, get_settings
from catalog.repositories.product_repository import InMemoryProductRepository
from catalog.repositories.seed import SEED_PRODUCTS
from catalog.services.product_service import ProductService

# Singleton repository, built on first access
_repository: InMemoryProductRepository | None = None


def get_product_repository(
    settings: Settings = Depends(get_settings),
) -> InMemoryProductRepository:
    global _repository
    if _repository is None:
        _repository = InMemoryProductRepository(
            products=SEED_PRODUCTS if settings.seed_catalog else (),
            id_policy=settings.id_policy,
        )
    return _repository


def get_product_service(
    repo: InMemoryProductRepository = Depends(get_product_repository),
) -> ProductService:
    return ProductService(repository=repo)
