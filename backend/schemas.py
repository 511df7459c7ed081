from typing import List, Literal

from pydantic import BaseModel, Field

from domain import Order


class OrderRequest(BaseModel):
    id: int = Field(..., description="Caller-assigned order identifier")
    type: Literal["standard", "express"] = Field(..., description="Order type, selects the payment path")
    quantity: int = Field(..., gt=0, description="Units requested")
    amount: float = Field(..., ge=0, description="Amount to charge")
    customer_email: str = Field(..., min_length=3, description="Notification address")

    def to_order(self) -> Order:
        return Order(
            id=self.id,
            type=self.type,
            quantity=self.quantity,
            amount=self.amount,
            customer_email=self.customer_email,
        )


class ProcessOrderResponse(BaseModel):
    order_id: int
    type: str
    status: str


class OrderStatusRecord(BaseModel):
    order_id: int
    status: str


class OrderStatusListResponse(BaseModel):
    items: List[OrderStatusRecord]
