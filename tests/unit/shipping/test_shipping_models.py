"""Unit tests for the Address and ShippingCost models."""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.db import IntegrityError

from modules.shipping.models import ShippingCost

pytestmark = pytest.mark.unit


class TestAddress:
    def test_full_address(self, address):
        assert address.full_address == "Ho Chi Minh, District 1, Ben Nghe 12 Le Loi"

    def test_str_is_full_address(self, address):
        assert str(address) == address.full_address


class TestShippingCost:
    def test_one_rate_per_province(self, shipping_cost):
        with pytest.raises(IntegrityError):
            ShippingCost.objects.create(province_code="79", cost=Decimal("5.00"))

    def test_cost_cannot_be_negative(self):
        with pytest.raises(IntegrityError):
            ShippingCost.objects.create(province_code="01", cost=Decimal("-1.00"))

    def test_zero_cost_allowed(self):
        rate = ShippingCost.objects.create(province_code="01", cost=Decimal("0.00"))
        assert rate.cost == Decimal("0.00")
