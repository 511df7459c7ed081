import logging
from typing import Union

from domain import Order
from .contracts import ExpressPaymentGateway, StandardPaymentGateway
from .errors import ExpressPaymentFailed, PaymentFailed

logger = logging.getLogger("order-desk")


class PaymentProcessor:
    """Charges an order through the injected gateway.

    The gateway is called with the amount only for standard charges and with
    the amount plus a priority tag for express charges. A falsy reply is a
    decline.
    """

    def __init__(self, gateway: Union[StandardPaymentGateway, ExpressPaymentGateway]) -> None:
        self.gateway = gateway

    def charge_standard(self, order: Order) -> bool:
        if not self.gateway.process(order.amount):
            logger.warning("payment declined order=%s amount=%s", order.id, order.amount)
            raise PaymentFailed(order.id)
        logger.info("payment charged order=%s amount=%s", order.id, order.amount)
        return True

    def charge_express(self, order: Order, priority: str) -> bool:
        if not self.gateway.process(order.amount, priority):
            logger.warning(
                "express payment declined order=%s amount=%s priority=%s", order.id, order.amount, priority
            )
            raise ExpressPaymentFailed(order.id, priority)
        logger.info("express payment charged order=%s amount=%s priority=%s", order.id, order.amount, priority)
        return True
