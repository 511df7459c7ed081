"""Errors raised while processing an order.

Processors let these propagate unmodified; the API layer translates them
into HTTP responses.
"""
from __future__ import annotations


class OrderProcessingError(Exception):
    """Base class for every processing failure."""

    def __init__(self, order_id: int, message: str) -> None:
        super().__init__(message)
        self.order_id = order_id


class OutOfStock(OrderProcessingError):
    """Available inventory is below the ordered quantity."""

    def __init__(self, order_id: int, requested: int, available: int) -> None:
        super().__init__(
            order_id,
            f"Order {order_id} is out of stock: requested {requested}, available {available}",
        )
        self.requested = requested
        self.available = available


class PaymentFailed(OrderProcessingError):
    """The payment gateway declined a standard charge."""

    def __init__(self, order_id: int) -> None:
        super().__init__(order_id, f"Payment failed for order {order_id}")


class ExpressPaymentFailed(OrderProcessingError):
    """The payment gateway declined an express charge."""

    def __init__(self, order_id: int, priority: str) -> None:
        super().__init__(order_id, f"Express payment failed for order {order_id} (priority={priority})")
        self.priority = priority
