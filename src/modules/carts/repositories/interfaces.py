"""Cart repository interface.

The order workflow reads a user's cart as a snapshot, asks whether it
still has items, and clears it once payment is settled.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from modules.carts.models import CartItem


class ICartRepository(ABC):
    """Repository contract for live cart items.

    Carts are addressed by owner only; single items are never fetched.
    """

    @abstractmethod
    def snapshot(self, user_id: str) -> List[CartItem]:
        """Return the user's current cart items; empty list when none."""

    @abstractmethod
    def has_items(self, user_id: str) -> bool:
        """Return ``True`` if the user's live cart is non-empty."""

    @abstractmethod
    def clear(self, user_id: str) -> int:
        """Remove every item from the user's cart.

        Idempotent: clearing an empty cart returns ``0``.
        """
