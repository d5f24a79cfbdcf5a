"""Domain exceptions raised by the service layer."""


class StorefrontError(Exception):
    """Base class for storefront domain errors."""


class NotFoundError(StorefrontError):
    """Requested record does not exist."""


class ConflictError(StorefrontError):
    """Record already exists or is in a state that forbids the operation."""


class OrderNotCancellableError(ConflictError):
    """Order has moved past the point where the customer may cancel it."""

    def __init__(self, order_id: str, status: str):
        super().__init__(f"Order {order_id} cannot be cancelled while {status}")
        self.order_id = order_id
        self.status = status
