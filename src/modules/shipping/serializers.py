"""Shipping DRF serializers."""

from __future__ import annotations

from rest_framework import serializers


class ShippingQuoteSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    province_code = serializers.CharField(read_only=True)
    province_name = serializers.CharField(read_only=True)
    cost = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
