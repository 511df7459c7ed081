"""
Domain model: the order passed through every processing step.

Order is defined here only; every other module imports it from here.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

OrderType = Literal["standard", "express"]

ORDER_TYPES = ("standard", "express")


@dataclass(frozen=True)
class Order:
    """A customer order.

    - id: caller-assigned identifier, the only identity an order has
    - type: 'standard' | 'express'
    - quantity: units requested, compared against the inventory level
    - amount: sum charged through the payment gateway
    - customer_email: where the processed notification goes
    """

    id: int
    type: OrderType
    quantity: int
    amount: float
    customer_email: str
