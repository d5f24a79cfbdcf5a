"""Order data models and their presentation projections."""

from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""

    PENDING = "pending"
    ASSIGNED = "assigned"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderedItem(BaseModel):
    """Line item in an order."""

    name: str = Field(..., min_length=1, description="Product name")
    image: Optional[str] = Field(None, description="Product image URL")
    price: float = Field(..., ge=0, description="Unit price")
    quantity: int = Field(..., ge=1, description="Quantity ordered")
    brand: Optional[str] = None


class ShippingForm(BaseModel):
    """Delivery address captured at checkout."""

    address: str = Field(..., min_length=1)
    apartment: Optional[str] = None
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zipCode: str = Field(..., min_length=1)


class OrderCreate(BaseModel):
    """Order creation model posted by checkout."""

    userId: str = Field(..., min_length=1, description="User placing the order")
    orderedItems: list[OrderedItem] = Field(..., min_length=1)
    shippingForm: ShippingForm
    tax: float = Field(0.0, ge=0)
    shippingCost: float = Field(0.0, ge=0)
    priority: Optional[str] = None
    estimatedDelivery: Optional[datetime] = None


class OrderInDB(BaseModel):
    """Order model as stored in database.

    ``status`` is kept as a plain string so that a record carrying a value
    outside :class:`OrderStatus` can still be read and rendered.
    """

    orderId: str = Field(..., description="Order identifier")
    userId: str = Field(..., description="User who placed the order")
    status: str = Field(OrderStatus.PENDING.value, description="Order status")
    priority: Optional[str] = None
    orderedItems: list[OrderedItem] = Field(..., description="Items in the order")
    subtotal: float = Field(..., ge=0)
    tax: float = Field(0.0, ge=0)
    shippingCost: float = Field(0.0, ge=0)
    total: float = Field(..., ge=0)
    shippingForm: ShippingForm
    estimatedDelivery: Optional[datetime] = None
    createdAt: Optional[datetime] = None
    assignedAt: Optional[datetime] = None
    pickedAt: Optional[datetime] = None
    deliveredAt: Optional[datetime] = None
    cancelledAt: Optional[datetime] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "orderId": "8f14e45f-ceea-467a-9575-6d1d3a8e3e8b",
                "userId": "user_001",
                "status": "assigned",
                "priority": "high",
                "orderedItems": [
                    {
                        "name": "Canvas Sneakers",
                        "image": "https://example.com/sneakers.jpg",
                        "price": 49.99,
                        "quantity": 2,
                        "brand": "Stride",
                    }
                ],
                "subtotal": 99.98,
                "tax": 8.0,
                "shippingCost": 5.0,
                "total": 112.98,
                "shippingForm": {
                    "address": "12 Market St",
                    "apartment": "4B",
                    "city": "Springfield",
                    "state": "IL",
                    "zipCode": "62701",
                },
                "createdAt": "2024-02-28T09:15:00Z",
                "assignedAt": "2024-02-29T10:00:00Z",
            }
        }
    }


class CancelOrderRequest(BaseModel):
    """Customer-initiated cancellation."""

    orderId: str = Field(..., min_length=1)
    status: Literal["cancelled"] = "cancelled"


class StatusBadge(BaseModel):
    """Style and label for an order status pill."""

    bgColor: str
    textColor: str
    borderColor: str
    label: str


class PriorityBadge(StatusBadge):
    """Marker shown next to high priority orders."""


class ProgressStep(BaseModel):
    """One milestone in an order's progress timeline."""

    key: str
    label: str
    date: Optional[datetime] = None
    active: bool
    cancelled: Optional[bool] = None


class OrderView(OrderInDB):
    """Order record together with everything needed to render it."""

    statusBadge: StatusBadge
    priorityBadge: Optional[PriorityBadge] = None
    progressSteps: list[ProgressStep]
    canCancel: bool
    placedOn: str
    estimatedDeliveryOn: str
    totalDisplay: str
    shippingAddress: str


class OrderSummary(BaseModel):
    """Order counts for the tracking sidebar."""

    active: int = 0
    delivered: int = 0
    total: int = 0


class StatusFilterCount(BaseModel):
    """Entry in the status filter bar."""

    key: str
    label: str
    count: int


class OrderListResponse(BaseModel):
    """Orders for one user along with summary counts."""

    orders: list[OrderView] = Field(default_factory=list)
    summary: OrderSummary
    filters: list[StatusFilterCount] = Field(default_factory=list)


class CancelOrderResponse(BaseModel):
    """Cancellation result carrying the stored order."""

    success: bool
    order: OrderView
