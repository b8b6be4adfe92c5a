"""Unit tests for OrderDjangoRepository.

Covers:
- Aggregate creation (Order + OrderItems) atomically.
- UNIQUE(user_id) surfacing as DuplicateOrder.
- Reads with prefetched items; invalid IDs.
- PENDING -> PAID transition.
- Hard delete with cascading items.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest
from django.db import IntegrityError

from modules.orders.constants import OrderStatus
from modules.orders.exceptions import DuplicateOrder, InvalidOrderStatus
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.django_repository import (
    OrderDjangoRepository,
    _is_user_order_conflict,
)
from modules.orders.repositories.interfaces import IOrderRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def repo():
    return OrderDjangoRepository()


def _order_data(user_id="user-0001", **overrides):
    data = {
        "user_id": user_id,
        "address_id": uuid4(),
        "shipping_address": "Ho Chi Minh, District 1, Ben Nghe 12 Le Loi",
        "shipping_cost_id": uuid4(),
        "shipping_cost": Decimal("20.00"),
        "price": Decimal("150.00"),
        "discount": Decimal("10.00"),
        "total_amount": Decimal("160.00"),
        "email": "buyer@example.com",
        "items": [
            {
                "product_id": uuid4(),
                "category_name": "Shoes",
                "product_name": "Runner",
                "quantity": 1,
                "price": Decimal("100.00"),
                "discount": Decimal("10.00"),
                "image_file_path": "/images/runner.png",
            },
            {
                "product_id": uuid4(),
                "category_name": "Socks",
                "product_name": "Ankle socks",
                "quantity": 2,
                "price": Decimal("50.00"),
                "discount": Decimal("0.00"),
                "image_file_path": "",
            },
        ],
    }
    data.update(overrides)
    return data


@pytest.fixture()
def order(repo):
    return repo.create(_order_data())


# ===========================================================================
# Interface compliance
# ===========================================================================


class TestInterfaceCompliance:
    def test_implements_interface(self, repo):
        assert isinstance(repo, IOrderRepository)


# ===========================================================================
# Create
# ===========================================================================


class TestCreate:
    def test_creates_order_with_items(self, order):
        assert Order.objects.filter(id=order.id).exists()
        assert OrderItem.objects.filter(order=order).count() == 2

    def test_defaults_to_pending(self, order):
        assert order.status == OrderStatus.PENDING
        assert order.paid_at is None

    def test_creates_order_without_items(self, repo):
        order = repo.create(_order_data(items=[]))
        assert order.items.count() == 0

    def test_second_order_for_user_raises_duplicate(self, repo, order):
        with pytest.raises(DuplicateOrder):
            repo.create(_order_data())

        assert Order.objects.filter(user_id="user-0001").count() == 1
        assert OrderItem.objects.count() == 2

    def test_different_users_can_each_have_an_order(self, repo, order):
        other = repo.create(_order_data(user_id="user-0002"))
        assert other.id != order.id


class TestConflictDetection:
    def test_recognizes_constraint_name(self):
        exc = IntegrityError(
            'duplicate key value violates unique constraint "orders_one_order_per_user"'
        )
        assert _is_user_order_conflict(exc)

    def test_recognizes_sqlite_column_message(self):
        assert _is_user_order_conflict(
            IntegrityError("UNIQUE constraint failed: orders.user_id")
        )

    def test_ignores_unrelated_violation(self):
        assert not _is_user_order_conflict(
            IntegrityError("CHECK constraint failed: order_items_quantity_positive")
        )


# ===========================================================================
# Read
# ===========================================================================


class TestRead:
    def test_get_by_id(self, repo, order):
        found = repo.get_by_id(str(order.id))
        assert found.id == order.id
        assert len(found.items.all()) == 2

    def test_get_by_id_unknown_returns_none(self, repo):
        assert repo.get_by_id(str(uuid4())) is None

    def test_get_by_id_invalid_uuid_returns_none(self, repo):
        assert repo.get_by_id("not-a-uuid") is None

    def test_get_by_user_id(self, repo, order):
        assert repo.get_by_user_id("user-0001").id == order.id
        assert repo.get_by_user_id("nobody") is None

    def test_list_filters(self, repo, order):
        repo.create(_order_data(user_id="user-0002"))

        assert repo.list().count() == 2
        assert list(repo.list({"user_id": "user-0002"}).values_list("user_id", flat=True)) == [
            "user-0002"
        ]


# ===========================================================================
# mark_paid
# ===========================================================================


class TestMarkPaid:
    def test_marks_pending_order_paid(self, repo, order):
        repo.mark_paid(order)

        order.refresh_from_db()
        assert order.status == OrderStatus.PAID
        assert order.paid_at is not None

    def test_rejects_second_transition(self, repo, order):
        repo.mark_paid(order)

        with pytest.raises(InvalidOrderStatus):
            repo.mark_paid(order)


# ===========================================================================
# Delete
# ===========================================================================


class TestDelete:
    def test_hard_deletes_order_and_items(self, repo, order):
        assert repo.delete(str(order.id)) is True

        assert not Order.objects.filter(id=order.id).exists()
        assert OrderItem.objects.count() == 0

    def test_unknown_id_returns_false(self, repo):
        assert repo.delete(str(uuid4())) is False

    def test_invalid_id_returns_false(self, repo):
        assert repo.delete("not-a-uuid") is False
