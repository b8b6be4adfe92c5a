"""Shipping repository interfaces.

The order workflow needs exactly two lookups from the reference data:
an address by ID and a shipping cost by province code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.shipping.models import Address, ShippingCost


class IAddressRepository(IRepository["Address"]):
    """Read-only access to delivery addresses."""


class IShippingCostRepository(ABC):
    """Read-only access to shipping rates."""

    @abstractmethod
    def get_by_province_code(self, province_code: str) -> Optional[ShippingCost]:
        """Retrieve the rate for *province_code*, or ``None``."""
