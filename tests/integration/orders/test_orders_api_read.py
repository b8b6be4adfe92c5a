"""Integration tests for GET /api/v1/orders/ and /api/v1/orders/{id}/."""

from __future__ import annotations

from unittest.mock import patch
from uuid import uuid4

import pytest
from django.db import DatabaseError

from modules.orders.repositories.django_repository import OrderDjangoRepository

pytestmark = pytest.mark.integration

ORDERS_URL = "/api/v1/orders/"


class TestRetrieve:
    def test_returns_order_with_items(self, auth_client, placed_order):
        response = auth_client.get(f"{ORDERS_URL}{placed_order['id']}/")

        assert response.status_code == 200
        assert response.data["id"] == placed_order["id"]
        assert len(response.data["items"]) == 2

    def test_unknown(self, auth_client):
        response = auth_client.get(f"{ORDERS_URL}{uuid4()}/")
        assert response.status_code == 404


class TestList:
    def test_paginated(self, auth_client, placed_order):
        response = auth_client.get(ORDERS_URL)

        assert response.status_code == 200
        assert response.data["count"] == 1
        assert response.data["results"][0]["id"] == placed_order["id"]
        assert "items" not in response.data["results"][0]

    def test_filter_by_user(self, auth_client, placed_order):
        assert auth_client.get(ORDERS_URL, {"user_id": "nobody"}).data["count"] == 0
        assert (
            auth_client.get(ORDERS_URL, {"user_id": placed_order["user_id"]}).data["count"]
            == 1
        )

    def test_filter_by_status(self, auth_client, placed_order):
        assert auth_client.get(ORDERS_URL, {"status": "pending"}).data["count"] == 1
        assert auth_client.get(ORDERS_URL, {"status": "PAID"}).data["count"] == 0

    def test_filter_by_total(self, auth_client, placed_order):
        assert auth_client.get(ORDERS_URL, {"min_total": "100"}).data["count"] == 1
        assert auth_client.get(ORDERS_URL, {"max_total": "100"}).data["count"] == 0


class TestReadFaults:
    def test_retrieve_storage_failure(self, auth_client, placed_order):
        with patch.object(
            OrderDjangoRepository, "get_by_id", side_effect=DatabaseError("db gone")
        ):
            response = auth_client.get(f"{ORDERS_URL}{placed_order['id']}/")

        assert response.status_code == 500
        assert response.data == {"detail": "Internal server error."}

    def test_list_storage_failure(self, auth_client):
        with patch.object(
            OrderDjangoRepository, "list", side_effect=DatabaseError("db gone")
        ):
            response = auth_client.get(ORDERS_URL)

        assert response.status_code == 500
        assert response.data == {"detail": "Internal server error."}
