"""Shipping API views.

Only the quote endpoint lives here; rate and address maintenance is
handled by the reference-data tooling, not by this service.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exception_handler import INTERNAL_ERROR_DETAIL
from modules.core.exceptions import InternalFailure
from modules.shipping.exceptions import AddressNotFound, ShippingCostNotFound
from modules.shipping.repositories.django_repository import (
    AddressDjangoRepository,
    ShippingCostDjangoRepository,
)
from modules.shipping.serializers import ShippingQuoteSerializer
from modules.shipping.services import ShippingCostResolver


class ShippingCostViewSet(ViewSet):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._resolver = ShippingCostResolver(
            address_repository=AddressDjangoRepository(),
            shipping_cost_repository=ShippingCostDjangoRepository(),
        )

    @action(detail=False, methods=["get"], url_path=r"quote/(?P<address_id>[^/.]+)")
    def quote(self, request: Request, address_id: str | None = None) -> Response:
        """GET /api/v1/shipping-costs/quote/{address_id}/"""
        try:
            quote = self._resolver.quote_for_address(address_id or "")
        except AddressNotFound:
            return Response(
                {"detail": "Address not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        except ShippingCostNotFound as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_404_NOT_FOUND,
            )
        except InternalFailure:
            return Response(
                {"detail": INTERNAL_ERROR_DETAIL},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        serializer = ShippingQuoteSerializer(quote.model_dump())
        return Response(serializer.data)
