from domain import Order
from .processors import OrderProcessor


class OrderDispatcher:
    """Hands orders to the processor chosen when the dispatcher was built."""

    def __init__(self, processor: OrderProcessor) -> None:
        self.processor = processor

    def process_order(self, order: Order) -> None:
        self.processor.process(order)
