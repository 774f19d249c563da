# src/catalog/domain/models.py
from __future__ import annotations

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Aggregate: Product
# ---------------------------------------------------------------------------


class Product(BaseModel):
    """
    A catalog entry.
    The id is owned by the store: it is assigned on insert and used as the
    match key for replace and delete.
    """

    id: int
    name: str
    price: float = Field(description="Non-negative by convention, not enforced")
    description: str
    image: str = Field(description="Image URL, not validated")

    model_config = {"frozen": True, "strict": True}


# ---------------------------------------------------------------------------
# API Request/Response Schemas
# ---------------------------------------------------------------------------


class ProductCreate(BaseModel):
    # Accepted so full Product documents can be posted; the store overwrites it
    id: int | None = None
    name: str
    price: float
    description: str
    image: str

    model_config = {"frozen": True, "strict": True}

    def to_product(self, product_id: int) -> Product:
        return Product(
            id=product_id,
            name=self.name,
            price=self.price,
            description=self.description,
            image=self.image,
        )


class HealthStatus(BaseModel):
    status: str
    version: str
