"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderDTO``: input for order creation.
- ``PaymentCartItemDTO``: one ordered line as shown after payment.
- ``PaymentConfirmationDTO``: the payment confirmation view.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, List, Mapping
from uuid import UUID

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from modules.orders.exceptions import InvalidOrderRequest

if TYPE_CHECKING:
    from modules.orders.models import Order


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Line items are not part of the request: they are read from the
    user's cart by the Service Layer.  ``email`` may be left blank; such
    an order can be created but not paid, since the confirmation has
    nowhere to go.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    user_id: str
    address_id: UUID
    email: str = ""
    user_name: str = ""
    phone_number: str = ""
    note: str = ""

    @field_validator("user_id")
    @classmethod
    def user_id_must_not_be_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("user_id is required.")
        return v

    @field_validator("email")
    @classmethod
    def email_must_look_valid(cls, v: str) -> str:
        if v and "@" not in v:
            raise ValueError("A valid email address is required.")
        return v


def parse_create_order(data: Mapping[str, Any]) -> CreateOrderDTO:
    """Build a ``CreateOrderDTO``, reporting bad input as ``InvalidOrderRequest``."""
    try:
        return CreateOrderDTO(**data)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "request"
        raise InvalidOrderRequest(f"{field}: {error['msg']}") from exc


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class PaymentCartItemDTO(BaseModel):
    """Immutable DTO for an ordered line in the payment confirmation."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    user_id: str
    product_id: UUID
    category_name: str
    product_name: str
    quantity: int
    price: Decimal
    discount: Decimal
    image_file_path: str


class PaymentConfirmationDTO(BaseModel):
    """Immutable view of a settled order, returned to the caller and emailed."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    total_amount: Decimal
    shipping_address: str
    user_name: str
    phone_number: str
    email: str
    note: str
    order_date: datetime
    order_status: str
    cart_items: List[PaymentCartItemDTO]

    @classmethod
    def from_entity(cls, order: Order) -> PaymentConfirmationDTO:
        """Build the confirmation from an Order with prefetched ``items``.

        Each line is keyed by its product ID, as the storefront shows it.
        """
        cart_items = [
            PaymentCartItemDTO(
                id=item.product_id,
                user_id=order.user_id,
                product_id=item.product_id,
                category_name=item.category_name,
                product_name=item.product_name,
                quantity=item.quantity,
                price=item.price,
                discount=item.discount,
                image_file_path=item.image_file_path,
            )
            for item in order.items.all()
        ]
        return cls(
            id=order.id,
            total_amount=order.total_amount,
            shipping_address=order.shipping_address,
            user_name=order.user_name,
            phone_number=order.phone_number,
            email=order.email,
            note=order.note,
            order_date=order.order_date,
            order_status=order.status,
            cart_items=cart_items,
        )
