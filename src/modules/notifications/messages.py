"""Outgoing notification payloads.

``NotificationMessage`` is the transport-neutral payload a gateway
accepts.  ``build_order_confirmation`` renders the confirmation email
from Django templates so the order service never formats text itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from django.conf import settings
from django.template.loader import render_to_string
from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.orders.dtos import PaymentConfirmationDTO

ORDER_CONFIRMATION_TEXT_TEMPLATE = "notifications/order_confirmation.txt"
ORDER_CONFIRMATION_HTML_TEMPLATE = "notifications/order_confirmation.html"


class NotificationMessage(BaseModel):
    """Immutable message ready for delivery."""

    model_config = ConfigDict(frozen=True)

    to: Tuple[str, ...]
    subject: str
    body: str
    html_body: Optional[str] = None

    @field_validator("to")
    @classmethod
    def recipients_must_not_be_blank(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        recipients = tuple(r.strip() for r in v if r and r.strip())
        if not recipients:
            raise ValueError("At least one recipient is required.")
        return recipients


def build_order_confirmation(
    confirmation: PaymentConfirmationDTO,
) -> NotificationMessage:
    """Render the order confirmation email addressed to the order's email."""
    context = {"order": confirmation, "items": confirmation.cart_items}
    return NotificationMessage(
        to=(confirmation.email or "",),
        subject=settings.ORDER_CONFIRMATION_SUBJECT,
        body=render_to_string(ORDER_CONFIRMATION_TEXT_TEMPLATE, context),
        html_body=render_to_string(ORDER_CONFIRMATION_HTML_TEMPLATE, context),
    )
