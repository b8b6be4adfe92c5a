"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
Order + OrderItems are written inside one ``transaction.atomic()``
block.  The UNIQUE constraint on ``user_id`` is the authoritative
signal for a duplicate order: the resulting ``IntegrityError`` is
translated into ``DuplicateOrder``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import QuerySet
from django.utils import timezone

from modules.orders.constants import USER_ORDER_CONSTRAINT, OrderStatus
from modules.orders.exceptions import DuplicateOrder, InvalidOrderStatus
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)

ORDER_FIELDS = (
    "user_id",
    "address_id",
    "shipping_address",
    "shipping_cost_id",
    "shipping_cost",
    "price",
    "discount",
    "total_amount",
    "order_date",
    "status",
    "user_name",
    "phone_number",
    "email",
    "note",
)

ITEM_FIELDS = (
    "product_id",
    "category_name",
    "product_name",
    "quantity",
    "price",
    "discount",
    "image_file_path",
)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create (aggregate root + children)
    # ------------------------------------------------------------------

    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its items atomically.

        The inner ``atomic()`` is a savepoint when called from a service
        transaction, so a constraint violation can be caught here
        without breaking the caller's transaction.
        """
        order = Order(**{f: data[f] for f in ORDER_FIELDS if f in data})
        items = data.get("items", [])
        try:
            with transaction.atomic():
                order.save(force_insert=True)
                OrderItem.objects.bulk_create(
                    [
                        OrderItem(order=order, **{f: item[f] for f in ITEM_FIELDS})
                        for item in items
                    ]
                )
        except IntegrityError as exc:
            if _is_user_order_conflict(exc):
                logger.warning("order.duplicate_rejected", user_id=data["user_id"])
                raise DuplicateOrder(
                    f"An order already exists for user {data['user_id']}."
                ) from exc
            raise

        logger.info("order.persisted", order_id=str(order.id), item_count=len(items))
        return order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with prefetched items.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Order.objects.prefetch_related("items").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_user_id(self, user_id: str) -> Optional[Order]:
        return Order.objects.prefetch_related("items").filter(user_id=user_id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        """List orders with optional filters (e.g. ``user_id``, ``status``)."""
        queryset = Order.objects.prefetch_related("items")
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def mark_paid(self, order: Order) -> Order:
        if not order.can_transition_to(OrderStatus.PAID):
            raise InvalidOrderStatus(
                f"Cannot transition from {order.status} to {OrderStatus.PAID}."
            )
        order.status = OrderStatus.PAID
        order.paid_at = timezone.now()
        order.save(update_fields=["status", "paid_at"])
        logger.info("order.marked_paid", order_id=str(order.id))
        return order

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Hard-delete an order; items go with it (CASCADE)."""
        try:
            deleted, _ = Order.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        if deleted:
            logger.info("order.deleted", order_id=str(id))
        return bool(deleted)


def _is_user_order_conflict(exc: IntegrityError) -> bool:
    """Tell a duplicate-user violation apart from other integrity errors.

    Backends report the constraint name (PostgreSQL, MySQL) or the
    offending column (SQLite).
    """
    message = str(exc)
    return USER_ORDER_CONSTRAINT in message or "user_id" in message
