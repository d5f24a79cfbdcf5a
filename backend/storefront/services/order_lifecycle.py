"""Order lifecycle projection.

Pure functions that turn an order's status and timestamps into the data a
tracking page renders: a status badge, a progress timeline, a cancellation
flag and a priority marker. Nothing here performs I/O or mutates its input,
so every call with the same arguments returns an equal result.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any, Optional

from storefront.models.order import (
    OrderInDB,
    OrderStatus,
    OrderSummary,
    OrderView,
    PriorityBadge,
    ProgressStep,
    ShippingForm,
    StatusBadge,
    StatusFilterCount,
)

logger = logging.getLogger(__name__)

STATUS_BADGES: dict[OrderStatus, StatusBadge] = {
    OrderStatus.PENDING: StatusBadge(
        bgColor="bg-yellow-50",
        textColor="text-yellow-700",
        borderColor="border-yellow-200",
        label="Order Placed",
    ),
    OrderStatus.ASSIGNED: StatusBadge(
        bgColor="bg-blue-50",
        textColor="text-blue-700",
        borderColor="border-blue-200",
        label="Being Prepared",
    ),
    OrderStatus.OUT_FOR_DELIVERY: StatusBadge(
        bgColor="bg-purple-50",
        textColor="text-purple-700",
        borderColor="border-purple-200",
        label="Out for Delivery",
    ),
    OrderStatus.DELIVERED: StatusBadge(
        bgColor="bg-green-50",
        textColor="text-green-700",
        borderColor="border-green-200",
        label="Delivered",
    ),
    OrderStatus.CANCELLED: StatusBadge(
        bgColor="bg-gray-100",
        textColor="text-gray-700",
        borderColor="border-gray-300",
        label="Cancelled",
    ),
}

HIGH_PRIORITY_BADGE = PriorityBadge(
    bgColor="bg-red-50",
    textColor="text-red-700",
    borderColor="border-red-200",
    label="High Priority",
)

# Statuses at which each later timeline step counts as reached; "placed" always is.
STEP_REACHED_AT: dict[str, frozenset[OrderStatus]] = {
    "assigned": frozenset(
        {OrderStatus.ASSIGNED, OrderStatus.OUT_FOR_DELIVERY, OrderStatus.DELIVERED}
    ),
    "out_for_delivery": frozenset({OrderStatus.OUT_FOR_DELIVERY, OrderStatus.DELIVERED}),
    "delivered": frozenset({OrderStatus.DELIVERED}),
}

CANCELLABLE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.ASSIGNED})
ACTIVE_STATUSES = frozenset(
    {OrderStatus.PENDING, OrderStatus.ASSIGNED, OrderStatus.OUT_FOR_DELIVERY}
)

STATUS_FILTER_LABELS: dict[str, str] = {
    "all": "All",
    OrderStatus.PENDING.value: "Pending",
    OrderStatus.ASSIGNED.value: "Preparing",
    OrderStatus.OUT_FOR_DELIVERY.value: "In Transit",
    OrderStatus.DELIVERED.value: "Delivered",
    OrderStatus.CANCELLED.value: "Cancelled",
}


def parse_status(status: Any) -> Optional[OrderStatus]:
    """Return the matching :class:`OrderStatus`, or ``None`` if unrecognised."""
    if isinstance(status, OrderStatus):
        return status
    try:
        return OrderStatus(status)
    except ValueError:
        return None


def _status_or_pending(status: Any) -> OrderStatus:
    parsed = parse_status(status)
    if parsed is None:
        logger.warning("Unknown order status %r, projecting as pending", status)
        return OrderStatus.PENDING
    return parsed


def status_badge(status: Any) -> StatusBadge:
    """Badge for ``status``; unknown values get the pending badge."""
    return STATUS_BADGES[_status_or_pending(status)]


def priority_badge(priority: Optional[str]) -> Optional[PriorityBadge]:
    """High priority marker, or ``None`` for normal orders."""
    if priority == "high":
        return HIGH_PRIORITY_BADGE
    return None


def can_cancel(status: Any) -> bool:
    """Whether the customer may still cancel an order in ``status``."""
    return parse_status(status) in CANCELLABLE_STATUSES


def progress_steps(
    status: Any,
    created_at: Optional[datetime] = None,
    assigned_at: Optional[datetime] = None,
    picked_at: Optional[datetime] = None,
    delivered_at: Optional[datetime] = None,
    cancelled_at: Optional[datetime] = None,
) -> list[ProgressStep]:
    """Build the progress timeline for an order.

    A cancelled order yields two steps, ``placed`` and ``cancelled``. Every
    other status yields the four fixed steps ``placed``, ``assigned``,
    ``out_for_delivery`` and ``delivered``, each active once the order has
    reached it. Missing timestamps leave the step's ``date`` empty.
    """
    current = _status_or_pending(status)
    placed = ProgressStep(key="placed", label="Order Placed", date=created_at, active=True)

    if current is OrderStatus.CANCELLED:
        return [
            placed,
            ProgressStep(
                key="cancelled",
                label="Order Cancelled",
                date=cancelled_at,
                active=True,
                cancelled=True,
            ),
        ]

    return [
        placed,
        ProgressStep(
            key="assigned",
            label="Being Prepared",
            date=assigned_at,
            active=current in STEP_REACHED_AT["assigned"],
        ),
        ProgressStep(
            key="out_for_delivery",
            label="Out for Delivery",
            date=picked_at,
            active=current in STEP_REACHED_AT["out_for_delivery"],
        ),
        ProgressStep(
            key="delivered",
            label="Delivered",
            date=delivered_at,
            active=current in STEP_REACHED_AT["delivered"],
        ),
    ]


def project_order(order: OrderInDB) -> OrderView:
    """Attach badge, timeline, cancellation flag and display strings to a stored order."""
    return OrderView(
        **order.model_dump(),
        statusBadge=status_badge(order.status),
        priorityBadge=priority_badge(order.priority),
        progressSteps=progress_steps(
            order.status,
            order.createdAt,
            order.assignedAt,
            order.pickedAt,
            order.deliveredAt,
            order.cancelledAt,
        ),
        canCancel=can_cancel(order.status),
        placedOn=format_date(order.createdAt),
        estimatedDeliveryOn=format_date(order.estimatedDelivery),
        totalDisplay=format_price(order.total),
        shippingAddress=format_shipping_address(order.shippingForm),
    )


def filter_orders(orders: Iterable[OrderInDB], status_filter: str = "all") -> list[OrderInDB]:
    """Orders whose status equals ``status_filter``; ``all`` keeps everything."""
    if status_filter == "all":
        return list(orders)
    return [order for order in orders if order.status == status_filter]


def order_summary(orders: Iterable[OrderInDB]) -> OrderSummary:
    """Count active, delivered and total orders."""
    summary = OrderSummary()
    for order in orders:
        status = parse_status(order.status)
        summary.total += 1
        if status in ACTIVE_STATUSES:
            summary.active += 1
        elif status is OrderStatus.DELIVERED:
            summary.delivered += 1
    return summary


def status_filter_counts(orders: Iterable[OrderInDB]) -> list[StatusFilterCount]:
    """Filter bar entries, ``all`` first, each with its order count."""
    counts = {key: 0 for key in STATUS_FILTER_LABELS}
    for order in orders:
        counts["all"] += 1
        status = parse_status(order.status)
        if status is not None:
            counts[status.value] += 1
    return [
        StatusFilterCount(key=key, label=label, count=counts[key])
        for key, label in STATUS_FILTER_LABELS.items()
    ]


def format_date(value: Optional[datetime | date | str]) -> str:
    """Short US date such as ``Mar 1, 2024``; missing values read ``Not set``."""
    if not value:
        return "Not set"
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return f"{value:%b} {value.day}, {value.year}"


def format_price(amount: float) -> str:
    return f"{amount:.2f}"


def format_shipping_address(form: ShippingForm | Mapping[str, Any]) -> str:
    """Single-line delivery address."""
    if isinstance(form, Mapping):
        form = ShippingForm(**form)
    apartment = f", {form.apartment}" if form.apartment else ""
    return f"{form.address}{apartment}, {form.city}, {form.state} {form.zipCode}"
