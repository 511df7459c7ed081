"""
Order processing steps split by responsibility.

Each step wraps one injected collaborator; processors.py chains them and
dispatcher.py hands an order to whichever processor it was built with.
"""
from .dispatcher import OrderDispatcher
from .errors import ExpressPaymentFailed, OrderProcessingError, OutOfStock, PaymentFailed
from .processors import ExpressOrderProcessor, OrderProcessor, StandardOrderProcessor, build_processor

__all__ = [
    "OrderDispatcher",
    "OrderProcessor",
    "StandardOrderProcessor",
    "ExpressOrderProcessor",
    "build_processor",
    "OrderProcessingError",
    "OutOfStock",
    "PaymentFailed",
    "ExpressPaymentFailed",
]
