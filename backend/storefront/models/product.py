"""Product data models."""

from datetime import UTC, datetime
from typing import Optional

from pydantic import BaseModel, Field


class ProductBase(BaseModel):
    """Base catalog product."""

    productid: str = Field(..., min_length=1, description="Unique product identifier")
    name: str = Field(..., min_length=1, max_length=500)
    description: str = Field("", max_length=5000)
    price: float = Field(..., ge=0, description="Unit price")
    category: Optional[str] = Field(None, max_length=200)
    brand: Optional[str] = Field(None, max_length=200)
    images: list[str] = Field(default_factory=list, description="Image URLs")
    stock: int = Field(0, ge=0)


class ProductCreate(ProductBase):
    """Product creation model."""

    pass


class ProductInDB(ProductBase):
    """Product model as stored in database."""

    createdAt: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {
        "json_schema_extra": {
            "example": {
                "productid": "sneaker-canvas-01",
                "name": "Canvas Sneakers",
                "description": "Lightweight everyday sneakers with a cushioned sole.",
                "price": 49.99,
                "category": "Fashion",
                "brand": "Stride",
                "images": ["https://example.com/sneakers.jpg"],
                "stock": 25,
                "createdAt": "2024-02-22T00:00:00Z",
            }
        }
    }
