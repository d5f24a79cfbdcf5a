from datetime import UTC, date, datetime

import pytest

from storefront.models.order import OrderStatus
from storefront.services.order_lifecycle import (
    STATUS_BADGES,
    can_cancel,
    filter_orders,
    format_date,
    format_price,
    format_shipping_address,
    order_summary,
    priority_badge,
    progress_steps,
    project_order,
    status_badge,
    status_filter_counts,
)


@pytest.mark.parametrize("status, label", [
    ("pending", "Order Placed"),
    ("assigned", "Being Prepared"),
    ("out_for_delivery", "Out for Delivery"),
    ("delivered", "Delivered"),
    ("cancelled", "Cancelled"),
])
def test_status_badge_labels(status, label):
    assert status_badge(status).label == label
    assert status_badge(OrderStatus(status)).label == label


def test_status_badge_table_covers_every_status():
    assert set(STATUS_BADGES) == set(OrderStatus)


def test_status_badge_unknown_falls_back_to_pending():
    badge = status_badge("lost_in_transit")

    assert badge == status_badge("pending")
    assert badge.bgColor == "bg-yellow-50"
    assert status_badge(None).label == "Order Placed"


def test_status_badge_colours():
    badge = status_badge("cancelled")

    assert badge.bgColor == "bg-gray-100"
    assert badge.textColor == "text-gray-700"
    assert badge.borderColor == "border-gray-300"


@pytest.mark.parametrize("status", ["pending", "assigned", "out_for_delivery", "delivered"])
def test_progress_steps_non_cancelled_has_four_fixed_steps(status):
    steps = progress_steps(status)

    assert [s.key for s in steps] == ["placed", "assigned", "out_for_delivery", "delivered"]
    assert all(s.cancelled is None for s in steps)


def test_progress_steps_cancelled_has_two_steps():
    cancelled_at = datetime(2024, 3, 5, tzinfo=UTC)
    steps = progress_steps("cancelled", cancelled_at=cancelled_at)

    assert [s.key for s in steps] == ["placed", "cancelled"]
    assert steps[0].active is True
    assert steps[1].active is True
    assert steps[1].cancelled is True
    assert steps[1].label == "Order Cancelled"
    assert steps[1].date == cancelled_at


@pytest.mark.parametrize("status, expected", [
    ("pending", [True, False, False, False]),
    ("assigned", [True, True, False, False]),
    ("out_for_delivery", [True, True, True, False]),
    ("delivered", [True, True, True, True]),
])
def test_progress_steps_active_flags(status, expected):
    assert [s.active for s in progress_steps(status)] == expected


def test_progress_steps_active_flags_are_monotonic():
    order = ["pending", "assigned", "out_for_delivery", "delivered"]
    previous = [False] * 4
    for status in order:
        flags = [s.active for s in progress_steps(status)]
        # no step switches off as the order advances
        assert all(now or not before for before, now in zip(previous, flags))
        # once a step is inactive every later one is too
        assert flags == sorted(flags, reverse=True)
        previous = flags


def test_progress_steps_out_for_delivery_scenario():
    picked_at = datetime(2024, 3, 1, tzinfo=UTC)
    steps = progress_steps("out_for_delivery", picked_at=picked_at, delivered_at=None)

    placed, assigned, out_for_delivery, delivered = steps
    assert placed.active and assigned.active
    assert out_for_delivery.active is True
    assert out_for_delivery.date == picked_at
    assert delivered.active is False
    assert delivered.date is None


def test_progress_steps_dates_follow_timestamps():
    created = datetime(2024, 2, 28, tzinfo=UTC)
    assigned = datetime(2024, 2, 29, tzinfo=UTC)
    steps = progress_steps("assigned", created, assigned)

    assert steps[0].date == created
    assert steps[1].date == assigned
    assert steps[2].date is None


def test_progress_steps_unknown_status_projects_as_pending():
    assert progress_steps("mystery") == progress_steps("pending")


@pytest.mark.parametrize("status, expected", [
    ("pending", True),
    ("assigned", True),
    ("out_for_delivery", False),
    ("delivered", False),
    ("cancelled", False),
    ("mystery", False),
])
def test_can_cancel(status, expected):
    assert can_cancel(status) is expected


def test_priority_badge():
    badge = priority_badge("high")

    assert badge is not None
    assert badge.label == "High Priority"
    assert priority_badge(None) is None
    assert priority_badge("normal") is None


def test_projections_are_idempotent():
    created = datetime(2024, 2, 28, tzinfo=UTC)
    assert progress_steps("assigned", created) == progress_steps("assigned", created)
    assert status_badge("delivered") == status_badge("delivered")
    assert priority_badge("high") == priority_badge("high")
    assert can_cancel("pending") == can_cancel("pending")


def test_project_order_bundles_projections(order_factory):
    order = order_factory("assigned", priority="high", assignedAt=datetime(2024, 2, 29, tzinfo=UTC))
    view = project_order(order)

    assert view.orderId == order.orderId
    assert view.statusBadge.label == "Being Prepared"
    assert view.priorityBadge.label == "High Priority"
    assert view.canCancel is True
    assert [s.active for s in view.progressSteps] == [True, True, False, False]
    assert view.placedOn == "Feb 28, 2024"
    assert view.estimatedDeliveryOn == "Not set"
    assert view.totalDisplay == "112.98"
    assert view.shippingAddress == "12 Market St, Springfield, IL 62701"
    assert project_order(order) == view


def test_project_order_keeps_unknown_status(order_factory):
    view = project_order(order_factory("returned"))

    assert view.status == "returned"
    assert view.statusBadge.label == "Order Placed"
    assert view.canCancel is False


def test_order_summary_and_filter_counts(order_factory):
    orders = [
        order_factory("pending", order_id="a"),
        order_factory("assigned", order_id="b"),
        order_factory("out_for_delivery", order_id="c"),
        order_factory("delivered", order_id="d"),
        order_factory("delivered", order_id="e"),
        order_factory("cancelled", order_id="f"),
    ]

    summary = order_summary(orders)
    assert (summary.active, summary.delivered, summary.total) == (3, 2, 6)

    counts = {f.key: (f.label, f.count) for f in status_filter_counts(orders)}
    assert counts == {
        "all": ("All", 6),
        "pending": ("Pending", 1),
        "assigned": ("Preparing", 1),
        "out_for_delivery": ("In Transit", 1),
        "delivered": ("Delivered", 2),
        "cancelled": ("Cancelled", 1),
    }


def test_filter_orders(order_factory):
    orders = [order_factory("pending", order_id="a"), order_factory("delivered", order_id="b")]

    assert filter_orders(orders, "all") == orders
    assert [o.orderId for o in filter_orders(orders, "delivered")] == ["b"]
    assert filter_orders(orders, "cancelled") == []


def test_format_date():
    assert format_date(datetime(2024, 3, 1, 15, 30, tzinfo=UTC)) == "Mar 1, 2024"
    assert format_date(date(2023, 12, 25)) == "Dec 25, 2023"
    assert format_date("2024-03-05T10:00:00Z") == "Mar 5, 2024"
    assert format_date(None) == "Not set"


def test_format_price():
    assert format_price(112.98) == "112.98"
    assert format_price(5) == "5.00"


def test_format_shipping_address():
    assert format_shipping_address({
        "address": "12 Market St",
        "apartment": "4B",
        "city": "Springfield",
        "state": "IL",
        "zipCode": "62701",
    }) == "12 Market St, 4B, Springfield, IL 62701"
    assert format_shipping_address({
        "address": "9 Elm Rd",
        "city": "Portland",
        "state": "OR",
        "zipCode": "97201",
    }) == "9 Elm Rd, Portland, OR 97201"
