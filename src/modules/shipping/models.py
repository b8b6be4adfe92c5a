"""Address and ShippingCost reference models.

Both are owned by the reference-data side of the storefront; the order
workflow only reads them.  An order copies the rendered address and the
cost amount at creation time, so later edits here never change an
existing order.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Address(BaseModel):
    """A user's delivery address, split into the administrative levels."""

    user_id: models.CharField = models.CharField(max_length=450, db_index=True)
    province_code: models.CharField = models.CharField(max_length=20)
    province_name: models.CharField = models.CharField(max_length=100)
    district_name: models.CharField = models.CharField(max_length=100)
    ward_name: models.CharField = models.CharField(max_length=100)
    street_address: models.CharField = models.CharField(max_length=255)

    class Meta:
        db_table = "addresses"
        ordering = ["-created_at"]

    @property
    def full_address(self) -> str:
        """Render the address the way it is printed on an order."""
        return (
            f"{self.province_name}, {self.district_name}, "
            f"{self.ward_name} {self.street_address}"
        )

    def __str__(self) -> str:
        return self.full_address


class ShippingCost(BaseModel):
    """Flat shipping rate for one province."""

    province_code: models.CharField = models.CharField(max_length=20, unique=True)
    cost: models.DecimalField = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    class Meta:
        db_table = "shipping_costs"
        ordering = ["province_code"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(cost__gte=0),
                name="shipping_costs_cost_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.province_code}: {self.cost}"
