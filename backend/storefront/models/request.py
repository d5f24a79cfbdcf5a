"""Shared API response models."""

from typing import Optional

from pydantic import BaseModel

from storefront.models.product import ProductInDB


class ProductSearchResponse(BaseModel):
    """Catalog search results."""

    query: Optional[str] = None
    count: int
    products: list[ProductInDB]


class DeleteResponse(BaseModel):
    """Result of a delete request."""

    success: bool
    deleted_count: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    services: dict[str, str]
