"""Order repository interface.

Extends ``IRepository[Order]`` with what the order lifecycle needs:
atomic creation with the cart snapshot, look-up by user, the paid
transition and hard deletion.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The Order aggregate includes its OrderItem children.  Mutations
    must be atomic.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its items atomically.

        ``data`` carries the Order fields plus ``items``: a list of
        dicts with ``product_id``, ``category_name``, ``product_name``,
        ``quantity``, ``price``, ``discount`` and ``image_file_path``.

        Raises:
            DuplicateOrder: the user already has an order.
        """

    @abstractmethod
    def get_by_user_id(self, user_id: str) -> Optional[Order]:
        """Retrieve the user's open order, if any."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        """List orders with optional filters."""

    @abstractmethod
    def mark_paid(self, order: Order) -> Order:
        """Record that the order has been paid and the customer notified."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Permanently remove an order and its items.

        Returns ``False`` when there was nothing to delete.
        """
