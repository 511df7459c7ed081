import logging

from domain import Order
from .contracts import InventorySource
from .errors import OutOfStock

logger = logging.getLogger("order-desk")


class InventoryChecker:
    def __init__(self, source: InventorySource) -> None:
        self.source = source

    def verify(self, order: Order) -> None:
        available = self.source.available_quantity()
        if available < order.quantity:
            logger.warning(
                "out of stock order=%s requested=%s available=%s", order.id, order.quantity, available
            )
            raise OutOfStock(order.id, order.quantity, available)
