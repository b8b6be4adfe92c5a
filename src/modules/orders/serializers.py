"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order, OrderItem

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateOrderSerializer(serializers.Serializer):
    """Validates the order creation request payload."""

    user_id = serializers.CharField(max_length=450)
    address_id = serializers.UUIDField()
    email = serializers.EmailField(
        max_length=255, required=False, default="", allow_blank=True
    )
    user_name = serializers.CharField(
        max_length=255, required=False, default="", allow_blank=True
    )
    phone_number = serializers.CharField(
        max_length=30, required=False, default="", allow_blank=True
    )
    note = serializers.CharField(required=False, default="", allow_blank=True)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderItemSerializer(serializers.ModelSerializer):
    """Read serializer for the frozen cart snapshot."""

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "product_id",
            "category_name",
            "product_name",
            "quantity",
            "price",
            "discount",
            "image_file_path",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders with nested items."""

    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "user_id",
            "address_id",
            "shipping_address",
            "shipping_cost_id",
            "shipping_cost",
            "price",
            "discount",
            "total_amount",
            "order_date",
            "status",
            "user_name",
            "phone_number",
            "email",
            "note",
            "items",
        ]
        read_only_fields = fields


class OrderListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for order list (no nested relations)."""

    class Meta:
        model = Order
        fields = [
            "id",
            "user_id",
            "status",
            "total_amount",
            "order_date",
        ]
        read_only_fields = fields


class PaymentCartItemSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    user_id = serializers.CharField()
    product_id = serializers.UUIDField()
    category_name = serializers.CharField()
    product_name = serializers.CharField()
    quantity = serializers.IntegerField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    discount = serializers.DecimalField(max_digits=12, decimal_places=2)
    image_file_path = serializers.CharField()


class PaymentConfirmationSerializer(serializers.Serializer):
    """Renders ``PaymentConfirmationDTO`` for the API response."""

    id = serializers.UUIDField()
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    shipping_address = serializers.CharField()
    user_name = serializers.CharField()
    phone_number = serializers.CharField()
    email = serializers.CharField()
    note = serializers.CharField()
    order_date = serializers.DateTimeField()
    order_status = serializers.CharField()
    cart_items = PaymentCartItemSerializer(many=True)
