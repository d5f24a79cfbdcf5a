"""Data models package."""

from storefront.models.order import (
    CancelOrderRequest,
    CancelOrderResponse,
    OrderCreate,
    OrderedItem,
    OrderInDB,
    OrderListResponse,
    OrderStatus,
    OrderSummary,
    OrderView,
    PriorityBadge,
    ProgressStep,
    ShippingForm,
    StatusBadge,
    StatusFilterCount,
)
from storefront.models.product import ProductBase, ProductCreate, ProductInDB
from storefront.models.request import (
    DeleteResponse,
    HealthResponse,
    ProductSearchResponse,
)
from storefront.models.review import RatingSummary, ReviewCreate, ReviewInDB
from storefront.models.user import UserCreate, UserInDB, UserResponse

__all__ = [
    # User models
    "UserCreate",
    "UserInDB",
    "UserResponse",
    # Product models
    "ProductBase",
    "ProductCreate",
    "ProductInDB",
    # Review models
    "ReviewCreate",
    "ReviewInDB",
    "RatingSummary",
    # Order models
    "OrderStatus",
    "OrderedItem",
    "ShippingForm",
    "OrderCreate",
    "OrderInDB",
    "OrderView",
    "StatusBadge",
    "PriorityBadge",
    "ProgressStep",
    "OrderSummary",
    "StatusFilterCount",
    "OrderListResponse",
    "CancelOrderRequest",
    "CancelOrderResponse",
    # Request/Response models
    "ProductSearchResponse",
    "DeleteResponse",
    "HealthResponse",
]
