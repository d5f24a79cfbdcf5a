"""User service for customer accounts."""

import logging
from typing import Optional

from storefront.database.mongodb import mongodb
from storefront.exceptions import ConflictError
from storefront.models.user import UserCreate, UserInDB

logger = logging.getLogger(__name__)


class UserService:
    """User service for handling customer account operations."""

    @staticmethod
    async def create_user(user: UserCreate) -> UserInDB:
        """Create a new customer."""
        try:
            created = await mongodb.create_user(user)
        except ValueError as e:
            logger.error("Error creating user: %s", e)
            raise ConflictError(str(e)) from e

        logger.info("User created: %s", created.userId)
        return created

    @staticmethod
    async def get_user(user_id: str) -> Optional[UserInDB]:
        """Get customer by ID."""
        try:
            return await mongodb.get_user(user_id)
        except ConnectionError as e:
            logger.error("Error getting user %s: %s", user_id, e)
            raise


# Global user service instance
user_service = UserService()
