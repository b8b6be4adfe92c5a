"""Shipping DTOs (Pydantic v2, immutable)."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ShippingQuoteDTO(BaseModel):
    """Shipping rate resolved for a concrete delivery address."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    province_code: str
    province_name: str
    cost: Decimal
