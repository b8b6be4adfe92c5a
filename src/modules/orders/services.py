"""Order service layer (Use Cases).

Orchestrates the order lifecycle over four independent data sources:
addresses, shipping costs, the live cart and the order store.

Operations:
- ``create_order``: cart snapshot + shipping cost -> priced order.
- ``delete_order``: guarded removal, blocked while the cart has items.
- ``process_payment``: notify the customer, then release the cart and
  retire the order.

Notification is sent before any data is changed, so a delivery failure
leaves the order resumable.  After a successful send the order is
marked ``PAID``; a retry of a ``PAID`` order skips the notification and
only repeats the release step.

Every storage fault, read or write, leaves an operation as
``InternalFailure`` after being logged with the operation's context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional
from uuid import UUID

import structlog
from django.db import DatabaseError, transaction
from django.utils import timezone
from pydantic import ValidationError

from modules.core.exceptions import InternalFailure, NotificationFailure
from modules.notifications.exceptions import NotificationDeliveryError
from modules.notifications.messages import build_order_confirmation
from modules.orders.constants import OrderStatus
from modules.orders.exceptions import (
    CartNotEmpty,
    DuplicateOrder,
    EmptyCart,
    OrderNotFound,
)
from modules.orders.pricing import OrderTotals, calculate_totals
from modules.orders.settlement import PaymentSettlement

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.carts.models import CartItem
    from modules.carts.repositories.interfaces import ICartRepository
    from modules.notifications.gateways import INotificationGateway
    from modules.orders.dtos import CreateOrderDTO, PaymentConfirmationDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.shipping.models import Address, ShippingCost
    from modules.shipping.services import ShippingCostResolver

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives its collaborators via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        cart_repository: ICartRepository,
        shipping_resolver: ShippingCostResolver,
        notification_gateway: INotificationGateway,
    ) -> None:
        self._order_repo = order_repository
        self._cart_repo = cart_repository
        self._shipping = shipping_resolver
        self._notifier = notification_gateway
        self._settlement = PaymentSettlement(order_repository, cart_repository)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create a priced order from the user's current cart.

        Steps:
        1. Reject if the user already has an order.
        2. Resolve the address, then the shipping cost for its province.
        3. Snapshot the cart; an empty cart is an error.
        4. Price the snapshot and persist order + items atomically.

        The live cart is left untouched.

        Raises:
            DuplicateOrder: the user already has an order.
            AddressNotFound: unknown ``address_id``.
            ShippingCostNotFound: no rate for the address's province.
            EmptyCart: the user's cart is empty.
            InternalFailure: a storage read or write failed.
        """
        log = logger.bind(user_id=dto.user_id, address_id=str(dto.address_id))
        log.info("order.creation_started")

        try:
            if self._order_repo.get_by_user_id(dto.user_id):
                log.info("order.duplicate_detected")
                raise DuplicateOrder(
                    f"An order already exists for user {dto.user_id}."
                )

            address = self._shipping.resolve_address(dto.address_id)
            shipping_cost = self._shipping.resolve_by_province(address.province_code)

            cart_items = self._cart_repo.snapshot(dto.user_id)
            if not cart_items:
                raise EmptyCart(f"Cart for user {dto.user_id} is empty.")

            totals = calculate_totals(cart_items, shipping_cost.cost)
            order = self._order_repo.create(
                _order_data(dto, address, shipping_cost, cart_items, totals)
            )
            created = self._order_repo.get_by_id(str(order.id)) or order
        except DatabaseError as exc:
            log.error("order.create_failed", error=str(exc))
            raise InternalFailure("Failed to create order.") from exc

        log.info(
            "order.created",
            order_id=str(order.id),
            item_count=len(cart_items),
            total_amount=str(totals.total),
        )
        return created

    @transaction.atomic
    def delete_order(self, order_id: UUID | str) -> None:
        """Permanently delete an order.

        Raises:
            OrderNotFound: order does not exist.
            CartNotEmpty: the user's live cart still has items.
            InternalFailure: a storage read or the delete failed.
        """
        log = logger.bind(order_id=str(order_id))
        order = self._load_order(order_id, log)
        log = log.bind(user_id=order.user_id)

        try:
            if self._cart_repo.has_items(order.user_id):
                log.warning("order.delete_blocked_by_cart")
                raise CartNotEmpty(
                    "Cannot delete the order while the user's cart still has items."
                )
            self._order_repo.delete(str(order.id))
        except DatabaseError as exc:
            log.error("order.delete_failed", error=str(exc))
            raise InternalFailure("Failed to delete order.") from exc

        log.info("order.deleted_by_request")

    def process_payment(self, order_id: UUID | str) -> PaymentConfirmationDTO:
        """Settle payment for an order.

        Order of effects: notify -> mark paid -> (clear cart + delete
        order) in one transaction.

        Raises:
            OrderNotFound: order does not exist (no notification sent).
            NotificationFailure: no recipient, or delivery failed; order
                and cart intact.
            InternalFailure: a storage step failed.  After notification
                this is logged as ``order.payment.settlement_incomplete``.
        """
        log = logger.bind(order_id=str(order_id))
        order = self._load_order(order_id, log)
        log = log.bind(user_id=order.user_id)
        log.info("order.payment_started", total_amount=str(order.total_amount))

        try:
            confirmation = self._settlement.build_confirmation(order)
        except DatabaseError as exc:
            log.error("order.load_failed", error=str(exc))
            raise InternalFailure("Failed to load order.") from exc

        if order.is_paid:
            log.warning(
                "order.payment.confirmation_already_sent",
                paid_at=str(order.paid_at),
            )
        else:
            self._notify(confirmation, log)
            try:
                self._order_repo.mark_paid(order)
            except DatabaseError as exc:
                log.error(
                    "order.payment.settlement_incomplete",
                    step="mark_paid",
                    error=str(exc),
                )
                raise InternalFailure("Payment could not be recorded.") from exc

        try:
            self._settlement.settle(order)
        except DatabaseError as exc:
            log.error(
                "order.payment.settlement_incomplete",
                step="release",
                error=str(exc),
            )
            raise InternalFailure("Payment could not be settled.") from exc

        log.info("order.payment_processed")
        return confirmation

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: UUID | str) -> Order:
        """Raises:
        OrderNotFound: if the order does not exist.
        InternalFailure: the lookup failed.
        """
        return self._load_order(order_id, logger.bind(order_id=str(order_id)))

    def list_orders(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        return self._order_repo.list(filters)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _load_order(self, order_id: UUID | str, log: Any) -> Order:
        try:
            order = self._order_repo.get_by_id(str(order_id))
        except DatabaseError as exc:
            log.error("order.load_failed", error=str(exc))
            raise InternalFailure("Failed to load order.") from exc
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")
        return order

    def _notify(self, confirmation: PaymentConfirmationDTO, log: Any) -> None:
        try:
            message = build_order_confirmation(confirmation)
        except ValidationError as exc:
            log.error("order.payment.notification_invalid", error=str(exc))
            raise NotificationFailure(
                "Order has no deliverable email address."
            ) from exc

        try:
            self._notifier.send(message)
        except NotificationDeliveryError as exc:
            log.error("order.payment.notification_failed", error=str(exc))
            raise NotificationFailure(
                "Order confirmation could not be delivered."
            ) from exc

        log.info("order.payment.notified")


def _order_data(
    dto: CreateOrderDTO,
    address: Address,
    shipping_cost: ShippingCost,
    cart_items: List[CartItem],
    totals: OrderTotals,
) -> Dict[str, Any]:
    """Assemble the repository payload: header copies + item snapshot."""
    return {
        "user_id": dto.user_id,
        "address_id": address.id,
        "shipping_address": address.full_address,
        "shipping_cost_id": shipping_cost.id,
        "shipping_cost": totals.shipping_cost,
        "price": totals.price,
        "discount": totals.discount,
        "total_amount": totals.total,
        "order_date": timezone.now(),
        "status": OrderStatus.PENDING,
        "user_name": dto.user_name,
        "phone_number": dto.phone_number,
        "email": dto.email,
        "note": dto.note,
        "items": [
            {
                "product_id": item.product_id,
                "category_name": item.category_name,
                "product_name": item.product_name,
                "quantity": item.quantity,
                "price": item.price,
                "discount": item.discount,
                "image_file_path": item.image_file_path,
            }
            for item in cart_items
        ],
    }
