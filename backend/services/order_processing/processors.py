import logging
from abc import ABC, abstractmethod

from domain import ORDER_TYPES, Order
from .constants import EXPRESS_PRIORITY, ORDER_STATUS_PROCESSED
from .inventory import InventoryChecker
from .messaging import CustomerNotifier
from .payments import PaymentProcessor
from .status import OrderStatusUpdater

logger = logging.getLogger("order-desk")


class OrderProcessor(ABC):
    """Runs the four processing steps in a fixed order.

    inventory -> payment -> status -> notification. The first step that
    raises stops the chain and the error reaches the caller unchanged; steps
    that already ran are not undone. Variants differ only in how payment is
    charged.
    """

    order_type: str = ""

    def __init__(
        self,
        inventory: InventoryChecker,
        payments: PaymentProcessor,
        status_updater: OrderStatusUpdater,
        notifier: CustomerNotifier,
    ) -> None:
        self.inventory = inventory
        self.payments = payments
        self.status_updater = status_updater
        self.notifier = notifier

    def process(self, order: Order) -> None:
        if order.type != self.order_type:
            logger.warning(
                "order=%s has type=%s but is handled by the %s processor", order.id, order.type, self.order_type
            )
        self.inventory.verify(order)
        self.charge(order)
        self.status_updater.set_status(order, ORDER_STATUS_PROCESSED)
        self.notifier.notify(order)
        logger.info("order processed order=%s type=%s", order.id, self.order_type)

    @abstractmethod
    def charge(self, order: Order) -> None:
        ...


class StandardOrderProcessor(OrderProcessor):
    order_type = "standard"

    def charge(self, order: Order) -> None:
        self.payments.charge_standard(order)


class ExpressOrderProcessor(OrderProcessor):
    order_type = "express"

    def charge(self, order: Order) -> None:
        self.payments.charge_express(order, EXPRESS_PRIORITY)


PROCESSORS = {
    "standard": StandardOrderProcessor,
    "express": ExpressOrderProcessor,
}


def build_processor(
    order_type: str,
    inventory: InventoryChecker,
    payments: PaymentProcessor,
    status_updater: OrderStatusUpdater,
    notifier: CustomerNotifier,
) -> OrderProcessor:
    processor_cls = PROCESSORS.get(order_type)
    if processor_cls is None:
        raise ValueError(f"Unsupported order type {order_type!r}; expected one of {', '.join(ORDER_TYPES)}")
    return processor_cls(inventory, payments, status_updater, notifier)
