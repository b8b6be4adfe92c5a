"""Shipping repositories package."""

from modules.shipping.repositories.django_repository import (
    AddressDjangoRepository,
    ShippingCostDjangoRepository,
)
from modules.shipping.repositories.interfaces import (
    IAddressRepository,
    IShippingCostRepository,
)

__all__ = [
    "AddressDjangoRepository",
    "IAddressRepository",
    "IShippingCostRepository",
    "ShippingCostDjangoRepository",
]
