"""Shipping cost resolution.

``ShippingCostResolver`` is the leaf lookup the order workflow uses to
go from a delivery address to the amount charged for shipping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import structlog
from django.db import DatabaseError

from modules.core.exceptions import InternalFailure
from modules.shipping.dtos import ShippingQuoteDTO
from modules.shipping.exceptions import AddressNotFound, ShippingCostNotFound

if TYPE_CHECKING:
    from modules.shipping.models import Address, ShippingCost
    from modules.shipping.repositories.interfaces import (
        IAddressRepository,
        IShippingCostRepository,
    )

logger = structlog.get_logger(__name__)


class ShippingCostResolver:
    """Resolves addresses and the shipping rate for their province.

    Receives repositories via constructor injection (DIP).  Storage
    faults surface as ``InternalFailure``.
    """

    def __init__(
        self,
        address_repository: IAddressRepository,
        shipping_cost_repository: IShippingCostRepository,
    ) -> None:
        self._address_repo = address_repository
        self._shipping_cost_repo = shipping_cost_repository

    def resolve_address(self, address_id: UUID | str) -> Address:
        """Raises:
        AddressNotFound: no address with *address_id*.
        InternalFailure: the lookup failed.
        """
        try:
            address = self._address_repo.get_by_id(str(address_id))
        except DatabaseError as exc:
            logger.error(
                "shipping.address_lookup_failed",
                address_id=str(address_id),
                error=str(exc),
            )
            raise InternalFailure("Address lookup failed.") from exc
        if not address:
            raise AddressNotFound(f"Address {address_id} not found.")
        return address

    def resolve_by_province(self, province_code: str) -> ShippingCost:
        """Raises:
        ShippingCostNotFound: no rate is registered for the province.
        InternalFailure: the lookup failed.
        """
        try:
            shipping_cost = self._shipping_cost_repo.get_by_province_code(
                province_code
            )
        except DatabaseError as exc:
            logger.error(
                "shipping.cost_lookup_failed",
                province_code=province_code,
                error=str(exc),
            )
            raise InternalFailure("Shipping cost lookup failed.") from exc
        if not shipping_cost:
            logger.warning("shipping.cost_missing", province_code=province_code)
            raise ShippingCostNotFound(
                f"No shipping cost registered for province {province_code}."
            )
        return shipping_cost

    def quote_for_address(self, address_id: UUID | str) -> ShippingQuoteDTO:
        """Return the shipping rate that applies to *address_id*."""
        address = self.resolve_address(address_id)
        shipping_cost = self.resolve_by_province(address.province_code)
        return ShippingQuoteDTO(
            id=shipping_cost.id,
            province_code=shipping_cost.province_code,
            province_name=address.province_name,
            cost=shipping_cost.cost,
        )
