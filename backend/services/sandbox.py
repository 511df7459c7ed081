"""
Sandbox collaborators for running the service without a real payment
gateway or mail provider. Every call is logged and recorded.
"""
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger("order-desk")


class SandboxPaymentGateway:
    def __init__(self, approve: bool = True) -> None:
        self.approve = approve
        self.charges: List[Dict[str, Any]] = []

    def process(self, amount: float, priority: Optional[str] = None) -> bool:
        self.charges.append({"amount": amount, "priority": priority, "approved": self.approve})
        logger.info("sandbox charge amount=%s priority=%s approved=%s", amount, priority, self.approve)
        return self.approve


class SandboxEmailService:
    def __init__(self, echo: bool = True) -> None:
        self.echo = echo
        self.outbox: List[Dict[str, str]] = []

    def send_email(self, address: str, message: str) -> None:
        self.outbox.append({"address": address, "message": message})
        if self.echo:
            logger.info("sandbox email to=%s message=%s", address, message)
