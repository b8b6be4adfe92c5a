"""Django ORM implementation of the Cart repository."""

from __future__ import annotations

from typing import List

import structlog

from modules.carts.models import CartItem
from modules.carts.repositories.interfaces import ICartRepository

logger = structlog.get_logger(__name__)


class CartDjangoRepository(ICartRepository):
    """Concrete Cart repository backed by Django ORM."""

    def snapshot(self, user_id: str) -> List[CartItem]:
        """Evaluate the queryset immediately so later cart edits are not seen."""
        return list(CartItem.objects.filter(user_id=user_id).order_by("created_at"))

    def has_items(self, user_id: str) -> bool:
        return CartItem.objects.filter(user_id=user_id).exists()

    def clear(self, user_id: str) -> int:
        deleted, _ = CartItem.objects.filter(user_id=user_id).delete()
        logger.info("cart.cleared", user_id=user_id, item_count=deleted)
        return deleted
