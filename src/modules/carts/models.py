"""Live shopping-cart line items.

A cart is simply the set of ``CartItem`` rows for one ``user_id``.
Rows stay mutable until the user pays; placing an order copies them
into ``orders.OrderItem`` and leaves the cart itself untouched.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class CartItem(BaseModel):
    """One product line in a user's cart.

    ``price`` and ``discount`` are line amounts as stored by the
    storefront; orders read them verbatim.
    """

    user_id: models.CharField = models.CharField(max_length=450, db_index=True)
    product_id: models.UUIDField = models.UUIDField()
    category_name: models.CharField = models.CharField(
        max_length=255, blank=True, default=""
    )
    product_name: models.CharField = models.CharField(max_length=255)
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    price: models.DecimalField = models.DecimalField(max_digits=12, decimal_places=2)
    discount: models.DecimalField = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    image_file_path: models.CharField = models.CharField(
        max_length=500, blank=True, default=""
    )

    class Meta:
        db_table = "cart_items"
        ordering = ["created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="cart_items_quantity_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.product_name} x{self.quantity} ({self.user_id})"
