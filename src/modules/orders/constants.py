"""Order domain constants.

An order is created ``PENDING``.  Settlement moves it to ``PAID`` once
the customer has been notified, immediately before the order record is
retired.  ``CANCELLED`` is reserved for explicit cancellation flows.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    PAID = "PAID", "Paid"
    CANCELLED = "CANCELLED", "Cancelled"


VALID_TRANSITIONS: dict[str, set[str]] = {
    OrderStatus.PENDING: {OrderStatus.PAID, OrderStatus.CANCELLED},
    OrderStatus.PAID: set(),
    OrderStatus.CANCELLED: set(),
}

USER_ORDER_CONSTRAINT = "orders_one_order_per_user"
