"""Data loader service for importing catalog data."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from storefront.models.product import ProductCreate

logger = logging.getLogger(__name__)


class DataLoader:
    """Service for loading product data from JSON files."""

    @staticmethod
    def load_json_file(file_path: str | Path) -> list[dict[str, Any]]:
        """Load product records from a single JSON file.

        Accepts ``{"products": [...]}``, a single product object, or a flat
        array of products.
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if file_path.suffix.lower() != ".json":
            raise ValueError(f"File must be a JSON file: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in file %s: %s", file_path, e)
            raise

        if isinstance(data, dict) and "products" in data:
            data = data["products"]
        elif isinstance(data, dict):
            data = [data]
        elif not isinstance(data, list):
            raise ValueError("JSON must contain a 'products' array, an object, or an array")

        logger.info("Loaded %d records from %s", len(data), file_path)
        return data

    @staticmethod
    def load_directory(directory_path: str | Path) -> list[dict[str, Any]]:
        """Load all JSON files from a directory, in file name order."""
        directory_path = Path(directory_path)

        if not directory_path.is_dir():
            raise FileNotFoundError(f"Directory not found: {directory_path}")

        all_data: list[dict[str, Any]] = []
        json_files = sorted(directory_path.glob("*.json"))

        if not json_files:
            logger.warning("No JSON files found in %s", directory_path)
            return all_data

        for json_file in json_files:
            try:
                all_data.extend(DataLoader.load_json_file(json_file))
            except (ValueError, OSError) as e:
                logger.error("Skipping file %s: %s", json_file, e)

        logger.info("Loaded %d total records from %d files", len(all_data), len(json_files))
        return all_data

    @staticmethod
    def validate_products(data: list[dict[str, Any]]) -> list[ProductCreate]:
        """Validate raw records, dropping (and logging) the invalid ones."""
        products: list[ProductCreate] = []
        failed = 0

        for idx, item in enumerate(data):
            try:
                products.append(ProductCreate(**item))
            except (ValidationError, TypeError) as e:
                failed += 1
                logger.warning("Invalid product data at index %d: %s", idx, e)

        if failed:
            logger.warning("Failed to parse %d out of %d records", failed, len(data))

        logger.info("Successfully validated %d products", len(products))
        return products
