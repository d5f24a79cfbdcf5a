"""Database initialization script.

Creates indexes and seeds sample customers and orders covering every
order status, so the tracking endpoints have something to show.

Usage:
    python -m scripts.init_db
"""

import asyncio
import logging
from datetime import timedelta

from storefront.database.mongodb import mongodb
from storefront.exceptions import ConflictError
from storefront.models.order import OrderedItem, OrderInDB, OrderStatus, ShippingForm
from storefront.models.user import UserCreate
from storefront.services.user_service import user_service
from storefront.utils.helpers import generate_uuid, utc_now
from storefront.utils.logger import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


SAMPLE_USERS = [
    UserCreate(
        userId="user_001",
        firstName="Maya",
        lastName="Patel",
        email="maya.patel@example.com",
        phone="+1234567890",
    ),
    UserCreate(
        userId="user_002",
        firstName="Jonas",
        lastName="Berg",
        email="jonas.berg@example.com",
        phone="+1234567891",
    ),
    UserCreate(
        userId="admin_001",
        firstName="Store",
        lastName="Admin",
        email="admin@example.com",
        role="admin",
    ),
]


def _sample_order(user_id: str, status: OrderStatus, days_ago: int) -> OrderInDB:
    """Build an order whose timestamps match ``status``."""
    created = utc_now() - timedelta(days=days_ago)
    items = [
        OrderedItem(
            name="Canvas Sneakers",
            image="https://example.com/sneakers.jpg",
            price=49.99,
            quantity=1,
            brand="Stride",
        ),
        OrderedItem(name="Wool Socks", price=9.5, quantity=2, brand="Knitwise"),
    ]
    subtotal = round(sum(item.price * item.quantity for item in items), 2)
    order = OrderInDB(
        orderId=generate_uuid(),
        userId=user_id,
        status=status.value,
        priority="high" if status is OrderStatus.ASSIGNED else None,
        orderedItems=items,
        subtotal=subtotal,
        tax=5.52,
        shippingCost=4.99,
        total=round(subtotal + 5.52 + 4.99, 2),
        shippingForm=ShippingForm(
            address="12 Market St", apartment="4B", city="Springfield", state="IL", zipCode="62701"
        ),
        createdAt=created,
    )

    reached = {
        OrderStatus.ASSIGNED: 1,
        OrderStatus.OUT_FOR_DELIVERY: 2,
        OrderStatus.DELIVERED: 3,
    }.get(status, 0)
    if reached >= 1:
        order.assignedAt = created + timedelta(hours=4)
    if reached >= 2:
        order.pickedAt = created + timedelta(days=1)
    if reached >= 3:
        order.deliveredAt = created + timedelta(days=2)
    if status is OrderStatus.CANCELLED:
        order.cancelledAt = created + timedelta(hours=1)
    return order


async def init_databases():
    """Initialize the database and create sample data."""
    try:
        logger.info("Initializing database...")

        await mongodb.connect()

        for user in SAMPLE_USERS:
            try:
                await user_service.create_user(user)
                logger.info("Created user: %s", user.userId)
            except ConflictError as e:
                logger.warning("User %s already exists: %s", user.userId, e)

        for days_ago, status in enumerate(OrderStatus):
            order = _sample_order("user_001", status, days_ago + 1)
            await mongodb.create_order(order)
            logger.info("Created %s order %s", status.value, order.orderId)

        logger.info("Database initialization completed successfully")

    except Exception as e:
        logger.error("Error initializing database: %s", e)
        raise

    finally:
        await mongodb.disconnect()


if __name__ == "__main__":
    asyncio.run(init_databases())
