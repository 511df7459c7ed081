import logging

from fastapi import APIRouter, Depends, HTTPException, status

from auth import get_current_user_id
from schemas import OrderRequest, OrderStatusListResponse, OrderStatusRecord, ProcessOrderResponse
from services.order_processing.constants import ORDER_STATUS_PROCESSED
from services.order_processing.errors import ExpressPaymentFailed, OutOfStock, PaymentFailed
from services.order_processing_service import order_processing_service

logger = logging.getLogger("order-desk")

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("/process", response_model=ProcessOrderResponse)
async def process_order(
    payload: OrderRequest,
    user_id: str = Depends(get_current_user_id),
) -> ProcessOrderResponse:
    order = payload.to_order()
    logger.info("process order=%s type=%s user=%s", order.id, order.type, user_id)
    try:
        await order_processing_service.process_order_async(order)
    except OutOfStock as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except (PaymentFailed, ExpressPaymentFailed) as exc:
        raise HTTPException(status_code=status.HTTP_402_PAYMENT_REQUIRED, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Order processing failed order=%s: %s", order.id, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return ProcessOrderResponse(order_id=order.id, type=order.type, status=ORDER_STATUS_PROCESSED)


@router.get("/status", response_model=OrderStatusListResponse)
async def read_statuses(
    user_id: str = Depends(get_current_user_id),
) -> OrderStatusListResponse:
    _ = user_id
    items = [
        OrderStatusRecord(order_id=order_id, status=order_status)
        for order_id, order_status in order_processing_service.recorded_statuses()
    ]
    return OrderStatusListResponse(items=items)
