from decimal import Decimal

import pytest

from django.contrib.auth import get_user_model

from rest_framework.test import APIClient

from modules.carts.models import CartItem
from modules.shipping.models import Address, ShippingCost

USER_ID = "user-0001"


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = get_user_model().objects.create_user(
        username="storefront", password="testpass123"
    )
    client.force_authenticate(user=user)
    return client


# ---------------------------------------------------------------------------
# Reference data + cart
# ---------------------------------------------------------------------------


@pytest.fixture()
def user_id():
    return USER_ID


@pytest.fixture()
def address(user_id):
    return Address.objects.create(
        user_id=user_id,
        province_code="79",
        province_name="Ho Chi Minh",
        district_name="District 1",
        ward_name="Ben Nghe",
        street_address="12 Le Loi",
    )


@pytest.fixture()
def shipping_cost():
    return ShippingCost.objects.create(province_code="79", cost=Decimal("20.00"))


@pytest.fixture()
def make_cart_item(user_id):
    def _make(**overrides):
        defaults = {
            "user_id": user_id,
            "product_id": "0190a8a0-0000-7000-8000-000000000001",
            "category_name": "Shoes",
            "product_name": "Runner",
            "quantity": 1,
            "price": Decimal("100.00"),
            "discount": Decimal("10.00"),
            "image_file_path": "/images/runner.png",
        }
        defaults.update(overrides)
        return CartItem.objects.create(**defaults)

    return _make


@pytest.fixture()
def cart_items(make_cart_item):
    """Two lines: (100, discount 10) and (50, discount 0)."""
    return [
        make_cart_item(),
        make_cart_item(
            product_id="0190a8a0-0000-7000-8000-000000000002",
            category_name="Socks",
            product_name="Ankle socks",
            quantity=2,
            price=Decimal("50.00"),
            discount=Decimal("0.00"),
            image_file_path="/images/socks.png",
        ),
    ]
