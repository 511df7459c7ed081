import logging

from domain import Order
from .constants import NOTIFICATION_MESSAGE
from .contracts import EmailService

logger = logging.getLogger("order-desk")


class CustomerNotifier:
    def __init__(self, email_service: EmailService) -> None:
        self.email_service = email_service

    def notify(self, order: Order) -> None:
        self.email_service.send_email(order.customer_email, NOTIFICATION_MESSAGE)
        logger.info("customer notified order=%s email=%s", order.id, order.customer_email)
