"""
Collaborator contracts consumed by the processing steps.

Each is a single-method boundary; anything with a matching method can be
injected, including test doubles.
"""
from typing import Protocol


class InventorySource(Protocol):
    def available_quantity(self) -> int:
        ...


class StandardPaymentGateway(Protocol):
    def process(self, amount: float) -> bool:
        ...


class ExpressPaymentGateway(Protocol):
    def process(self, amount: float, priority: str) -> bool:
        ...


class OrderStatusStore(Protocol):
    def update_order_status(self, order_id: int, status: str) -> None:
        ...


class EmailService(Protocol):
    def send_email(self, address: str, message: str) -> None:
        ...
