"""Services package."""

from storefront.services.order_service import OrderService, order_service
from storefront.services.product_service import ProductService, product_service
from storefront.services.review_service import ReviewService, review_service
from storefront.services.user_service import UserService, user_service

__all__ = [
    "OrderService",
    "order_service",
    "ProductService",
    "product_service",
    "ReviewService",
    "review_service",
    "UserService",
    "user_service",
]
