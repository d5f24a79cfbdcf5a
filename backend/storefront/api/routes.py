"""API routes for the storefront."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from storefront.config import get_settings
from storefront.database.mongodb import mongodb
from storefront.exceptions import ConflictError, NotFoundError
from storefront.models.order import (
    CancelOrderRequest,
    CancelOrderResponse,
    OrderCreate,
    OrderListResponse,
    OrderStatus,
    OrderView,
)
from storefront.models.product import ProductCreate, ProductInDB
from storefront.models.request import DeleteResponse, HealthResponse, ProductSearchResponse
from storefront.models.review import RatingSummary, ReviewCreate, ReviewInDB
from storefront.models.user import UserCreate, UserResponse
from storefront.services.order_service import order_service
from storefront.services.product_service import product_service
from storefront.services.review_service import review_service
from storefront.services.user_service import user_service

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix=settings.api_prefix)

STATUS_FILTER_PATTERN = "^(all|" + "|".join(s.value for s in OrderStatus) + ")$"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    mongodb_status = "connected" if mongodb.db is not None else "disconnected"

    return HealthResponse(
        status="healthy" if mongodb_status == "connected" else "degraded",
        version=settings.app_version,
        services={"mongodb": mongodb_status},
    )


# Users


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate) -> UserResponse:
    """Create a new customer."""
    try:
        created_user = await user_service.create_user(user)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return UserResponse(**created_user.model_dump())


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    """Get customer by ID."""
    user = await user_service.get_user(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found: {user_id}",
        )
    return UserResponse(**user.model_dump())


# Products


@router.get("/products", response_model=ProductSearchResponse)
async def list_products(
    q: Optional[str] = Query(None, max_length=200, description="Name or description search"),
) -> ProductSearchResponse:
    """List the catalog, or search it when ``q`` is given."""
    products = await product_service.search_products(q)
    return ProductSearchResponse(query=q, count=len(products), products=products)


@router.get("/products/featured", response_model=list[ProductInDB])
async def featured_products() -> list[ProductInDB]:
    """Most recently added products for the home page."""
    return await product_service.featured_products()


@router.get("/products/{product_id}", response_model=ProductInDB)
async def get_product(product_id: str) -> ProductInDB:
    """Get a single product."""
    try:
        return await product_service.get_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/products", response_model=ProductInDB, status_code=status.HTTP_201_CREATED)
async def create_product(product: ProductCreate) -> ProductInDB:
    """Add a product to the catalog."""
    try:
        return await product_service.create_product(product)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete("/products/{product_id}", response_model=DeleteResponse)
async def delete_product(product_id: str) -> DeleteResponse:
    """Remove a product from the catalog."""
    try:
        deleted = await product_service.delete_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DeleteResponse(success=True, deleted_count=deleted)


@router.get("/products/{product_id}/rating", response_model=RatingSummary)
async def product_rating(product_id: str) -> RatingSummary:
    """Average rating and star distribution for a product."""
    return await review_service.rating_summary(product_id)


# Reviews


@router.post("/reviews", response_model=ReviewInDB, status_code=status.HTTP_201_CREATED)
async def create_review(review: ReviewCreate) -> ReviewInDB:
    """Submit a product review."""
    try:
        return await review_service.create_review(review)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/reviews", response_model=list[ReviewInDB])
async def list_reviews(
    product_id: Optional[str] = Query(None, alias="productId"),
) -> list[ReviewInDB]:
    """List reviews, optionally for one product."""
    return await review_service.list_reviews(product_id)


# Orders


@router.post("/orders", response_model=OrderView, status_code=status.HTTP_201_CREATED)
async def create_order(order: OrderCreate) -> OrderView:
    """Place an order."""
    return await order_service.create_order(order)


@router.get("/orders/{user_id}", response_model=OrderListResponse)
async def list_orders(
    user_id: str,
    status_filter: str = Query("all", alias="status", pattern=STATUS_FILTER_PATTERN),
) -> OrderListResponse:
    """Track a user's orders.

    Query:
        status: 'all' or one order status; summary counts always cover every order
    """
    return await order_service.list_user_orders(user_id, status_filter)


@router.patch("/orders/{user_id}", response_model=CancelOrderResponse)
async def cancel_order(user_id: str, request: CancelOrderRequest) -> CancelOrderResponse:
    """Cancel a pending or assigned order.

    Body:
        orderId: Order to cancel
        status: must be 'cancelled'

    The response carries the order as stored after the update.
    """
    try:
        order = await order_service.cancel_order(user_id, request.orderId)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        logger.warning("Cancellation refused: %s", e)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return CancelOrderResponse(success=True, order=order)
