"""Payment settlement.

Builds the payment confirmation for an order and, once the customer
has been notified, releases the user's cart and retires the order in a
single database transaction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.orders.dtos import PaymentConfirmationDTO

if TYPE_CHECKING:
    from modules.carts.repositories.interfaces import ICartRepository
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class PaymentSettlement:
    def __init__(
        self,
        order_repository: IOrderRepository,
        cart_repository: ICartRepository,
    ) -> None:
        self._order_repo = order_repository
        self._cart_repo = cart_repository

    def build_confirmation(self, order: Order) -> PaymentConfirmationDTO:
        return PaymentConfirmationDTO.from_entity(order)

    @transaction.atomic
    def settle(self, order: Order) -> None:
        """Clear the live cart and delete the order, all or nothing."""
        cleared = self._cart_repo.clear(order.user_id)
        self._order_repo.delete(str(order.id))
        logger.info(
            "order.settled",
            order_id=str(order.id),
            user_id=order.user_id,
            cart_items_cleared=cleared,
        )
