"""Order service for placing, listing and cancelling orders."""

import logging

from storefront.database.mongodb import mongodb
from storefront.exceptions import NotFoundError, OrderNotCancellableError
from storefront.models.order import (
    OrderCreate,
    OrderInDB,
    OrderListResponse,
    OrderStatus,
    OrderView,
)
from storefront.services.order_lifecycle import (
    CANCELLABLE_STATUSES,
    can_cancel,
    filter_orders,
    order_summary,
    project_order,
    status_filter_counts,
)
from storefront.utils.helpers import generate_uuid, round_money, utc_now

logger = logging.getLogger(__name__)


class OrderService:
    """Order service handling checkout and order tracking."""

    @staticmethod
    async def create_order(order: OrderCreate) -> OrderView:
        """Place a new pending order with server-computed totals."""
        subtotal = round_money(sum(item.price * item.quantity for item in order.orderedItems))
        record = OrderInDB(
            orderId=generate_uuid(),
            userId=order.userId,
            status=OrderStatus.PENDING.value,
            priority=order.priority,
            orderedItems=order.orderedItems,
            subtotal=subtotal,
            tax=round_money(order.tax),
            shippingCost=round_money(order.shippingCost),
            total=round_money(subtotal + order.tax + order.shippingCost),
            shippingForm=order.shippingForm,
            estimatedDelivery=order.estimatedDelivery,
            createdAt=utc_now(),
        )

        try:
            created = await mongodb.create_order(record)
        except Exception as e:
            logger.error("Error creating order for %s: %s", order.userId, e)
            raise

        logger.info(
            "Order %s placed by %s: %d items, $%.2f",
            created.orderId,
            created.userId,
            len(created.orderedItems),
            created.total,
        )
        return project_order(created)

    @staticmethod
    async def list_user_orders(user_id: str, status_filter: str = "all") -> OrderListResponse:
        """Project a user's orders, with counts taken over all of them."""
        orders = await mongodb.get_user_orders(user_id)
        return OrderListResponse(
            orders=[project_order(order) for order in filter_orders(orders, status_filter)],
            summary=order_summary(orders),
            filters=status_filter_counts(orders),
        )

    @staticmethod
    async def cancel_order(user_id: str, order_id: str) -> OrderView:
        """Cancel an order and return the stored result.

        The cancellation timestamp comes from the server; the returned view is
        built from the record written to the database.
        """
        order = await mongodb.get_order(user_id, order_id)
        if order is None:
            raise NotFoundError(f"Order not found: {order_id}")

        if not can_cancel(order.status):
            raise OrderNotCancellableError(order_id, order.status)

        updated = await mongodb.cancel_order(
            user_id,
            order_id,
            allowed_statuses=sorted(status.value for status in CANCELLABLE_STATUSES),
            cancelled_at=utc_now(),
        )
        if updated is None:
            # Status moved on between the read and the update.
            current = await mongodb.get_order(user_id, order_id)
            status = current.status if current else "unknown"
            raise OrderNotCancellableError(order_id, status)

        logger.info("Order %s cancelled by %s", order_id, user_id)
        return project_order(updated)


# Global order service instance
order_service = OrderService()
