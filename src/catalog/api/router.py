# src/catalog/api/router.py
from fastapi import APIRouter

from catalog.api import products

# Products are served from the root path
api_router = APIRouter()
api_router.include_router(products.router)
