"""Shipping domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import NotFound


class AddressNotFound(NotFound):
    """The delivery address does not exist."""


class ShippingCostNotFound(NotFound):
    """No shipping cost is registered for the address's province."""
