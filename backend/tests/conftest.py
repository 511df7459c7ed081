from unittest.mock import Mock

import pytest

from domain import Order
from services.order_processing.inventory import InventoryChecker
from services.order_processing.messaging import CustomerNotifier
from services.order_processing.payments import PaymentProcessor
from services.order_processing.status import OrderStatusUpdater


@pytest.fixture
def standard_order():
    return Order(id=1, type="standard", quantity=2, amount=50, customer_email="a@b.com")


@pytest.fixture
def express_order():
    return Order(id=2, type="express", quantity=1, amount=120.5, customer_email="c@d.com")


@pytest.fixture
def collaborators():
    """Collaborator doubles attached to one parent so call order is observable."""
    parent = Mock()
    parent.inventory.available_quantity.return_value = 5
    parent.gateway.process.return_value = True
    parent.store.update_order_status.return_value = None
    parent.email.send_email.return_value = None
    return parent


@pytest.fixture
def steps(collaborators):
    return (
        InventoryChecker(collaborators.inventory),
        PaymentProcessor(collaborators.gateway),
        OrderStatusUpdater(collaborators.store),
        CustomerNotifier(collaborators.email),
    )
