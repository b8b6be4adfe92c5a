"""Unit tests for the order confirmation message."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from django.test import override_settings
from pydantic import ValidationError

from modules.notifications.messages import NotificationMessage, build_order_confirmation
from modules.orders.dtos import PaymentCartItemDTO, PaymentConfirmationDTO

pytestmark = pytest.mark.unit


def _confirmation(**overrides):
    product_id = uuid4()
    data = {
        "id": uuid4(),
        "total_amount": Decimal("160.00"),
        "shipping_address": "Ho Chi Minh, District 1, Ben Nghe 12 Le Loi",
        "user_name": "Nguyen Van A",
        "phone_number": "0901234567",
        "email": "buyer@example.com",
        "note": "",
        "order_date": datetime(2026, 3, 1, 8, 30, tzinfo=timezone.utc),
        "order_status": "PENDING",
        "cart_items": [
            PaymentCartItemDTO(
                id=product_id,
                user_id="user-0001",
                product_id=product_id,
                category_name="Shoes",
                product_name="Runner",
                quantity=1,
                price=Decimal("100.00"),
                discount=Decimal("10.00"),
                image_file_path="",
            )
        ],
    }
    data.update(overrides)
    return PaymentConfirmationDTO(**data)


class TestNotificationMessage:
    def test_blank_recipients_rejected(self):
        with pytest.raises(ValidationError):
            NotificationMessage(to=("", "  "), subject="s", body="b")

    def test_recipients_trimmed(self):
        msg = NotificationMessage(to=(" a@example.com ",), subject="s", body="b")
        assert msg.to == ("a@example.com",)


class TestBuildOrderConfirmation:
    def test_addressed_to_order_email(self):
        msg = build_order_confirmation(_confirmation())
        assert msg.to == ("buyer@example.com",)

    def test_body_lists_order_details(self):
        confirmation = _confirmation()

        msg = build_order_confirmation(confirmation)

        assert str(confirmation.id) in msg.body
        assert "Nguyen Van A" in msg.body
        assert "Runner" in msg.body
        assert "160.00" in msg.body
        assert "Ben Nghe 12 Le Loi" in msg.body

    def test_has_html_alternative(self):
        msg = build_order_confirmation(_confirmation())
        assert "Runner" in msg.html_body

    def test_note_included_when_present(self):
        msg = build_order_confirmation(_confirmation(note="Ring twice"))
        assert "Ring twice" in msg.body

    @override_settings(ORDER_CONFIRMATION_SUBJECT="Your order")
    def test_subject_from_settings(self):
        assert build_order_confirmation(_confirmation()).subject == "Your order"

    def test_missing_email_is_invalid(self):
        with pytest.raises(ValidationError):
            build_order_confirmation(_confirmation(email=""))
