"""Django ORM implementations of the shipping repositories."""

from __future__ import annotations

from typing import Optional

from django.core.exceptions import ValidationError

from modules.shipping.models import Address, ShippingCost
from modules.shipping.repositories.interfaces import (
    IAddressRepository,
    IShippingCostRepository,
)


class AddressDjangoRepository(IAddressRepository):
    def get_by_id(self, id: str) -> Optional[Address]:
        try:
            return Address.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None


class ShippingCostDjangoRepository(IShippingCostRepository):
    def get_by_province_code(self, province_code: str) -> Optional[ShippingCost]:
        return ShippingCost.objects.filter(province_code=province_code).first()
