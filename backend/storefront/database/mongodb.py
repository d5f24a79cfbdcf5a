"""MongoDB database connection and operations."""

import logging
import re
from datetime import UTC, datetime
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import ConnectionFailure, DuplicateKeyError

from storefront.config import get_settings
from storefront.models.order import OrderInDB, OrderStatus
from storefront.models.product import ProductCreate, ProductInDB
from storefront.models.review import ReviewCreate, ReviewInDB
from storefront.models.user import UserCreate, UserInDB

logger = logging.getLogger(__name__)
settings = get_settings()


class MongoDB:
    """MongoDB connection manager."""

    def __init__(self) -> None:
        """Initialize MongoDB connection."""
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        """Connect to MongoDB."""
        try:
            self.client = AsyncIOMotorClient(
                settings.mongodb_url,
                maxPoolSize=settings.mongodb_max_pool_size,
                minPoolSize=settings.mongodb_min_pool_size,
                tz_aware=True,
            )
            self.db = self.client[settings.mongodb_database]

            # Test connection
            await self.client.admin.command("ping")
            logger.info("Connected to MongoDB: %s", settings.mongodb_database)

            await self._create_indexes()

        except ConnectionFailure as e:
            logger.error("Failed to connect to MongoDB: %s", e)
            raise

    async def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Disconnected from MongoDB")

    async def _create_indexes(self) -> None:
        """Create database indexes."""
        if self.db is not None:
            await self.db[settings.mongodb_user_collection].create_index(
                "userId", unique=True, name="userId_unique"
            )
            await self.db[settings.mongodb_product_collection].create_index(
                "productid", unique=True, name="productid_unique"
            )
            await self.db[settings.mongodb_review_collection].create_index(
                [("productId", ASCENDING), ("createdAt", DESCENDING)],
                name="productId_createdAt",
            )
            await self.db[settings.mongodb_order_collection].create_index(
                "orderId", unique=True, name="orderId_unique"
            )
            await self.db[settings.mongodb_order_collection].create_index(
                [("userId", ASCENDING), ("createdAt", DESCENDING)],
                name="userId_createdAt",
            )
            logger.info("MongoDB indexes created")

    def _collection(self, name: str):
        if self.db is None:
            raise ConnectionError("Database not connected")
        return self.db[name]

    # Users

    async def create_user(self, user: UserCreate) -> UserInDB:
        """Create a new user."""
        collection = self._collection(settings.mongodb_user_collection)
        record = UserInDB(**user.model_dump())

        try:
            await collection.insert_one(record.model_dump())
        except DuplicateKeyError:
            raise ValueError(f"User with userId '{user.userId}' already exists")

        return record

    async def get_user(self, user_id: str) -> Optional[UserInDB]:
        """Get user by ID."""
        collection = self._collection(settings.mongodb_user_collection)
        user_data = await collection.find_one({"userId": user_id}, {"_id": 0})

        if user_data:
            return UserInDB(**user_data)
        return None

    # Products

    async def create_product(self, product: ProductCreate) -> ProductInDB:
        """Insert a product into the catalog."""
        collection = self._collection(settings.mongodb_product_collection)
        record = ProductInDB(**product.model_dump())

        try:
            await collection.insert_one(record.model_dump())
        except DuplicateKeyError:
            raise ValueError(f"Product with productid '{product.productid}' already exists")

        return record

    async def get_product(self, product_id: str) -> Optional[ProductInDB]:
        """Get product by productid."""
        collection = self._collection(settings.mongodb_product_collection)
        data = await collection.find_one({"productid": product_id}, {"_id": 0})

        if data:
            return ProductInDB(**data)
        return None

    async def list_products(self) -> list[ProductInDB]:
        """List the catalog in insertion order."""
        collection = self._collection(settings.mongodb_product_collection)
        cursor = collection.find({}, {"_id": 0}).sort("createdAt", ASCENDING)
        return [ProductInDB(**doc) async for doc in cursor]

    async def search_products(self, term: str) -> list[ProductInDB]:
        """Case-insensitive substring match on name or description."""
        collection = self._collection(settings.mongodb_product_collection)
        pattern = {"$regex": re.escape(term), "$options": "i"}
        cursor = collection.find(
            {"$or": [{"name": pattern}, {"description": pattern}]}, {"_id": 0}
        ).sort("createdAt", ASCENDING)
        return [ProductInDB(**doc) async for doc in cursor]

    async def delete_product(self, product_id: str) -> int:
        """Delete a product by productid, returning the deleted count."""
        collection = self._collection(settings.mongodb_product_collection)
        result = await collection.delete_one({"productid": product_id})
        return result.deleted_count

    # Reviews

    async def create_review(self, review: ReviewCreate) -> ReviewInDB:
        """Store a product review."""
        collection = self._collection(settings.mongodb_review_collection)
        record = ReviewInDB(**review.model_dump())
        await collection.insert_one(record.model_dump())
        return record

    async def list_reviews(self, product_id: Optional[str] = None) -> list[ReviewInDB]:
        """List reviews, newest first, optionally for one product."""
        collection = self._collection(settings.mongodb_review_collection)
        query = {"productId": product_id} if product_id else {}
        cursor = collection.find(query, {"_id": 0}).sort("createdAt", DESCENDING)
        return [ReviewInDB(**doc) async for doc in cursor]

    # Orders

    async def create_order(self, order: OrderInDB) -> OrderInDB:
        """Insert a new order."""
        collection = self._collection(settings.mongodb_order_collection)

        try:
            await collection.insert_one(order.model_dump())
        except DuplicateKeyError:
            raise ValueError(f"Order '{order.orderId}' already exists")

        return order

    async def get_user_orders(self, user_id: str) -> list[OrderInDB]:
        """Get a user's orders, newest first."""
        collection = self._collection(settings.mongodb_order_collection)
        cursor = collection.find({"userId": user_id}, {"_id": 0}).sort("createdAt", DESCENDING)
        return [OrderInDB(**doc) async for doc in cursor]

    async def get_order(self, user_id: str, order_id: str) -> Optional[OrderInDB]:
        """Get one of a user's orders."""
        collection = self._collection(settings.mongodb_order_collection)
        data = await collection.find_one({"userId": user_id, "orderId": order_id}, {"_id": 0})

        if data:
            return OrderInDB(**data)
        return None

    async def cancel_order(
        self,
        user_id: str,
        order_id: str,
        allowed_statuses: list[str],
        cancelled_at: Optional[datetime] = None,
    ) -> Optional[OrderInDB]:
        """Mark an order cancelled if it is still in one of ``allowed_statuses``.

        Returns the updated order, or ``None`` when no order matched.
        """
        collection = self._collection(settings.mongodb_order_collection)
        data = await collection.find_one_and_update(
            {
                "userId": user_id,
                "orderId": order_id,
                "status": {"$in": allowed_statuses},
            },
            {
                "$set": {
                    "status": OrderStatus.CANCELLED.value,
                    "cancelledAt": cancelled_at or datetime.now(UTC),
                }
            },
            projection={"_id": 0},
            return_document=ReturnDocument.AFTER,
        )

        if data:
            return OrderInDB(**data)
        return None


# Global MongoDB instance
mongodb = MongoDB()
