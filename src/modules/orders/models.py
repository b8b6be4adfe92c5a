"""Order and OrderItem models.

Rules implemented here:
- At most one order per user: UNIQUE constraint on ``user_id``.  The
  service checks first, but the constraint is what closes the race
  between two concurrent creations.
- ``total_amount`` is ``price - discount + shipping_cost``, written once
  at creation and never recomputed.
- ``shipping_address`` and ``shipping_cost`` are copies taken at
  creation; later edits to the address or rate tables do not touch
  existing orders.
- ``OrderItem`` rows are a frozen snapshot of the cart, owned by the
  order (CASCADE).
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.orders.constants import (
    USER_ORDER_CONSTRAINT,
    VALID_TRANSITIONS,
    OrderStatus,
)


def _money(**kwargs) -> models.DecimalField:
    return models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00"), **kwargs
    )


class Order(BaseModel):
    """Order aggregate root."""

    user_id: models.CharField = models.CharField(max_length=450)
    address_id: models.UUIDField = models.UUIDField()
    shipping_address: models.CharField = models.CharField(max_length=600)
    shipping_cost_id: models.UUIDField = models.UUIDField()
    shipping_cost: models.DecimalField = _money()
    price: models.DecimalField = _money()
    discount: models.DecimalField = _money()
    total_amount: models.DecimalField = _money()
    order_date: models.DateTimeField = models.DateTimeField(default=timezone.now)
    status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )
    user_name: models.CharField = models.CharField(
        max_length=255, blank=True, default=""
    )
    phone_number: models.CharField = models.CharField(
        max_length=30, blank=True, default=""
    )
    email: models.EmailField = models.EmailField(
        max_length=255, blank=True, default=""
    )
    note: models.TextField = models.TextField(blank=True, default="")
    paid_at: models.DateTimeField = models.DateTimeField(
        null=True, blank=True, default=None
    )

    class Meta:
        db_table = "orders"
        ordering = ["-order_date"]
        constraints = [
            models.UniqueConstraint(fields=["user_id"], name=USER_ORDER_CONSTRAINT),
        ]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
        ]

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    def can_transition_to(self, new_status: str) -> bool:
        """Check whether transitioning to *new_status* is valid."""
        return new_status in VALID_TRANSITIONS.get(self.status, set())

    def __str__(self) -> str:
        return f"{self.id} ({self.status})"


class OrderItem(BaseModel):
    """Cart line copied into an order at creation time."""

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    product_id: models.UUIDField = models.UUIDField()
    category_name: models.CharField = models.CharField(
        max_length=255, blank=True, default=""
    )
    product_name: models.CharField = models.CharField(max_length=255)
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    price: models.DecimalField = _money()
    discount: models.DecimalField = _money()
    image_file_path: models.CharField = models.CharField(
        max_length=500, blank=True, default=""
    )

    class Meta:
        db_table = "order_items"
        ordering = ["created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="order_items_quantity_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.product_name} x{self.quantity} ({self.price})"
