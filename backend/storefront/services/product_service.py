"""Catalog service for product browsing, search and maintenance."""

import logging
from typing import Optional

from storefront.config import get_settings
from storefront.database.mongodb import mongodb
from storefront.exceptions import ConflictError, NotFoundError
from storefront.models.product import ProductCreate, ProductInDB

logger = logging.getLogger(__name__)
settings = get_settings()


class ProductService:
    """Product service for catalog operations."""

    @staticmethod
    async def list_products() -> list[ProductInDB]:
        """List the whole catalog."""
        return await mongodb.list_products()

    @staticmethod
    async def search_products(query: Optional[str]) -> list[ProductInDB]:
        """Search by name or description.

        ``None`` lists everything; a blank query matches nothing.
        """
        if query is None:
            return await mongodb.list_products()

        term = query.strip()
        if not term:
            return []

        products = await mongodb.search_products(term)
        logger.debug("Search %r matched %d products", term, len(products))
        return products

    @staticmethod
    async def featured_products() -> list[ProductInDB]:
        """The most recently added products, once the catalog is large enough."""
        count = settings.featured_products_count
        products = await mongodb.list_products()
        if count > 0 and len(products) > count:
            return products[-count:]
        return []

    @staticmethod
    async def get_product(product_id: str) -> ProductInDB:
        """Get a product or raise ``NotFoundError``."""
        product = await mongodb.get_product(product_id)
        if product is None:
            raise NotFoundError(f"Product not found: {product_id}")
        return product

    @staticmethod
    async def create_product(product: ProductCreate) -> ProductInDB:
        """Add a product to the catalog."""
        try:
            created = await mongodb.create_product(product)
        except ValueError as e:
            logger.warning("Error creating product: %s", e)
            raise ConflictError(str(e)) from e

        logger.info("Product created: %s", created.productid)
        return created

    @staticmethod
    async def delete_product(product_id: str) -> int:
        """Remove a product from the catalog."""
        deleted = await mongodb.delete_product(product_id)
        if not deleted:
            raise NotFoundError(f"Product not found: {product_id}")

        logger.info("Product deleted: %s", product_id)
        return deleted


# Global product service instance
product_service = ProductService()
