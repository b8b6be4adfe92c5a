"""Two creations for the same user that both pass the pre-check.

The pre-check is stubbed to miss, as it would for the loser of a
concurrent race; the UNIQUE constraint must still turn the second
insert into a 409.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository

pytestmark = pytest.mark.integration

ORDERS_URL = "/api/v1/orders/"


def test_constraint_rejects_second_order(
    auth_client, create_payload, shipping_cost, cart_items, user_id
):
    with patch.object(OrderDjangoRepository, "get_by_user_id", return_value=None):
        first = auth_client.post(ORDERS_URL, create_payload, format="json")
        second = auth_client.post(ORDERS_URL, create_payload, format="json")

    assert first.status_code == 201
    assert second.status_code == 409
    assert Order.objects.filter(user_id=user_id).count() == 1
