import logging

from domain import Order
from .contracts import OrderStatusStore

logger = logging.getLogger("order-desk")


class OrderStatusUpdater:
    def __init__(self, store: OrderStatusStore) -> None:
        self.store = store

    def set_status(self, order: Order, status: str) -> None:
        # Write only: the previous status is never read or checked
        self.store.update_order_status(order.id, status)
        logger.info("status updated order=%s status=%s", order.id, status)
