"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these by category and translates them
into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import Conflict, InvalidRequest, NotFound, PreconditionFailed


class InvalidOrderRequest(InvalidRequest):
    """The order request is malformed."""


class OrderNotFound(NotFound):
    """The requested order does not exist."""


class EmptyCart(NotFound):
    """The user has no cart items to order."""


class DuplicateOrder(Conflict):
    """The user already has an open order."""


class CartNotEmpty(PreconditionFailed):
    """The order cannot be deleted while the user's cart still has items."""


class InvalidOrderStatus(Conflict):
    """An invalid status transition was attempted."""
