import os

os.environ.setdefault("RATE_LIMIT_REQUESTS", "10000")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import UTC, datetime
from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from storefront.database.mongodb import mongodb
from storefront.main import app
from storefront.models.order import OrderedItem, OrderInDB, OrderStatus, ShippingForm
from storefront.models.product import ProductCreate, ProductInDB
from storefront.models.review import ReviewCreate, ReviewInDB
from storefront.models.user import UserCreate, UserInDB


class InMemoryMongoDB:
    """Stand-in for the MongoDB manager backed by plain lists."""

    def __init__(self) -> None:
        self.users: list[UserInDB] = []
        self.products: list[ProductInDB] = []
        self.reviews: list[ReviewInDB] = []
        self.orders: list[OrderInDB] = []

    async def create_user(self, user: UserCreate) -> UserInDB:
        if any(u.userId == user.userId for u in self.users):
            raise ValueError(f"User with userId '{user.userId}' already exists")
        record = UserInDB(**user.model_dump())
        self.users.append(record)
        return record

    async def get_user(self, user_id: str) -> Optional[UserInDB]:
        return next((u for u in self.users if u.userId == user_id), None)

    async def create_product(self, product: ProductCreate) -> ProductInDB:
        if any(p.productid == product.productid for p in self.products):
            raise ValueError(f"Product with productid '{product.productid}' already exists")
        record = ProductInDB(**product.model_dump())
        self.products.append(record)
        return record

    async def get_product(self, product_id: str) -> Optional[ProductInDB]:
        return next((p for p in self.products if p.productid == product_id), None)

    async def list_products(self) -> list[ProductInDB]:
        return list(self.products)

    async def search_products(self, term: str) -> list[ProductInDB]:
        term = term.lower()
        return [
            p for p in self.products
            if term in p.name.lower() or term in p.description.lower()
        ]

    async def delete_product(self, product_id: str) -> int:
        before = len(self.products)
        self.products = [p for p in self.products if p.productid != product_id]
        return before - len(self.products)

    async def create_review(self, review: ReviewCreate) -> ReviewInDB:
        record = ReviewInDB(**review.model_dump())
        self.reviews.append(record)
        return record

    async def list_reviews(self, product_id: Optional[str] = None) -> list[ReviewInDB]:
        reviews = [r for r in self.reviews if product_id is None or r.productId == product_id]
        return sorted(reviews, key=lambda r: r.createdAt, reverse=True)

    async def create_order(self, order: OrderInDB) -> OrderInDB:
        self.orders.append(order)
        return order

    async def get_user_orders(self, user_id: str) -> list[OrderInDB]:
        orders = [o for o in self.orders if o.userId == user_id]
        return sorted(orders, key=lambda o: o.createdAt, reverse=True)

    async def get_order(self, user_id: str, order_id: str) -> Optional[OrderInDB]:
        return next(
            (o for o in self.orders if o.userId == user_id and o.orderId == order_id), None
        )

    async def cancel_order(self, user_id, order_id, allowed_statuses, cancelled_at=None):
        order = await self.get_order(user_id, order_id)
        if order is None or order.status not in allowed_statuses:
            return None
        order.status = OrderStatus.CANCELLED.value
        order.cancelledAt = cancelled_at or datetime.now(UTC)
        return order.model_copy()


@pytest.fixture
def fake_db(monkeypatch):
    store = InMemoryMongoDB()
    for name in (
        "create_user",
        "get_user",
        "create_product",
        "get_product",
        "list_products",
        "search_products",
        "delete_product",
        "create_review",
        "list_reviews",
        "create_order",
        "get_user_orders",
        "get_order",
        "cancel_order",
    ):
        monkeypatch.setattr(mongodb, name, getattr(store, name))
    yield store


@pytest_asyncio.fixture
async def client(fake_db):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


def make_order(
    status: str = "pending",
    user_id: str = "user_001",
    order_id: str = "order-1",
    created_at: datetime = datetime(2024, 2, 28, 9, 0, tzinfo=UTC),
    **fields,
) -> OrderInDB:
    return OrderInDB(
        orderId=order_id,
        userId=user_id,
        status=status,
        orderedItems=[OrderedItem(name="Canvas Sneakers", price=49.99, quantity=2, brand="Stride")],
        subtotal=99.98,
        tax=8.0,
        shippingCost=5.0,
        total=112.98,
        shippingForm=ShippingForm(address="12 Market St", city="Springfield", state="IL", zipCode="62701"),
        createdAt=created_at,
        **fields,
    )


@pytest.fixture
def order_factory():
    return make_order
