import asyncio
import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from config import settings
from domain import Order
from repositories.inventory_repository import StaticInventory
from repositories.order_status_repository import InMemoryOrderStatusStore, SupabaseOrderStatusStore
from services.sandbox import SandboxEmailService, SandboxPaymentGateway
from supabase_client import get_supabase

from services.order_processing.contracts import (
    EmailService,
    ExpressPaymentGateway,
    InventorySource,
    OrderStatusStore,
    StandardPaymentGateway,
)
from services.order_processing.dispatcher import OrderDispatcher
from services.order_processing.inventory import InventoryChecker
from services.order_processing.messaging import CustomerNotifier
from services.order_processing.payments import PaymentProcessor
from services.order_processing.processors import build_processor
from services.order_processing.status import OrderStatusUpdater

logger = logging.getLogger("order-desk")


@dataclass
class Collaborators:
    inventory: InventorySource
    payment_gateway: Union[StandardPaymentGateway, ExpressPaymentGateway]
    status_store: OrderStatusStore
    email_service: EmailService


def _build_status_store() -> OrderStatusStore:
    if settings.supabase_enabled:
        return SupabaseOrderStatusStore(get_supabase(), settings.order_status_table)
    logger.info("Supabase is not configured; order statuses are kept in memory")
    return InMemoryOrderStatusStore()


def build_collaborators() -> Collaborators:
    return Collaborators(
        inventory=StaticInventory(settings.inventory_level),
        payment_gateway=SandboxPaymentGateway(approve=settings.payment_sandbox_approve),
        status_store=_build_status_store(),
        email_service=SandboxEmailService(),
    )


def build_dispatcher(order_type: str, collaborators: Collaborators) -> OrderDispatcher:
    processor = build_processor(
        order_type,
        InventoryChecker(collaborators.inventory),
        PaymentProcessor(collaborators.payment_gateway),
        OrderStatusUpdater(collaborators.status_store),
        CustomerNotifier(collaborators.email_service),
    )
    return OrderDispatcher(processor)


class OrderProcessingService:
    def __init__(self, collaborators: Optional[Collaborators] = None) -> None:
        self._collaborators = collaborators
        self._lock = threading.Lock()

    @property
    def collaborators(self) -> Collaborators:
        # First requests may arrive together on worker threads; all must share one set
        if self._collaborators is None:
            with self._lock:
                if self._collaborators is None:
                    self._collaborators = build_collaborators()
        return self._collaborators

    def process_order(self, order: Order) -> None:
        dispatcher = build_dispatcher(order.type, self.collaborators)
        dispatcher.process_order(order)

    async def process_order_async(self, order: Order) -> None:
        await asyncio.to_thread(self.process_order, order)

    def recorded_statuses(self) -> List[Tuple[int, str]]:
        store = self.collaborators.status_store
        if isinstance(store, InMemoryOrderStatusStore):
            return list(store.writes)
        return []


order_processing_service = OrderProcessingService()
