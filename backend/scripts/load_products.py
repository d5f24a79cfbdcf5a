"""Product data loading script.

Loads product JSON files from backend/data/products/ into the MongoDB
catalog. Products whose productid already exists are skipped.

Usage:
    python -m scripts.load_products           # prompts before clearing
    python -m scripts.load_products --clear    # clears catalog without prompting
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from storefront.config import get_settings
from storefront.database.mongodb import mongodb
from storefront.exceptions import ConflictError
from storefront.services.data_loader import DataLoader
from storefront.services.product_service import product_service
from storefront.utils.logger import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
settings = get_settings()


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load product data into MongoDB")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear existing products from MongoDB before loading",
    )
    return parser.parse_args()


async def load_products(*, clear: bool = False) -> None:
    """Load products from JSON files into the catalog."""
    try:
        logger.info("Starting product data loading...")

        await mongodb.connect()

        data_dir = Path(__file__).parent.parent / "data" / "products"
        if not data_dir.exists():
            logger.error("Products directory not found: %s", data_dir)
            return

        products = DataLoader.validate_products(DataLoader.load_directory(data_dir))
        if not products:
            logger.warning("No products found to load")
            return

        should_clear = clear
        if not should_clear and sys.stdin.isatty():
            should_clear = input("Clear existing products in MongoDB? (y/n): ").lower() == "y"

        if should_clear:
            result = await mongodb.db[settings.mongodb_product_collection].delete_many({})
            logger.info("Deleted %d existing products", result.deleted_count)

        loaded = 0
        for product in products:
            try:
                await product_service.create_product(product)
                loaded += 1
            except ConflictError:
                logger.info("Product %s already exists, skipping", product.productid)

        logger.info("Product loading completed! Loaded %d of %d", loaded, len(products))

    except Exception as e:
        logger.error("Error loading products: %s", e)
        raise
    finally:
        await mongodb.disconnect()


if __name__ == "__main__":
    args = _parse_args()
    asyncio.run(load_products(clear=args.clear))
