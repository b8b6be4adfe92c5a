"""Order API views.

Exposes the ``OrderService`` via HTTP using DRF ViewSets.
Domain exceptions are caught by category and translated into HTTP
status codes.  ``InternalFailure`` is answered with a generic message;
its details stay in the logs.  Anything not caught here, such as a
storage fault while listing, is answered by
``modules.core.exception_handler``.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.throttling import BaseThrottle
from rest_framework.viewsets import GenericViewSet

from modules.carts.repositories.django_repository import CartDjangoRepository
from modules.core.exception_handler import INTERNAL_ERROR_DETAIL
from modules.core.exceptions import (
    Conflict,
    InternalFailure,
    InvalidRequest,
    NotFound,
    NotificationFailure,
    PreconditionFailed,
)
from modules.notifications.gateways import EmailNotificationGateway
from modules.orders.dtos import parse_create_order
from modules.orders.filters import OrderFilter
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    CreateOrderSerializer,
    OrderListSerializer,
    OrderSerializer,
    PaymentConfirmationSerializer,
)
from modules.orders.services import OrderService
from modules.shipping.repositories.django_repository import (
    AddressDjangoRepository,
    ShippingCostDjangoRepository,
)
from modules.shipping.services import ShippingCostResolver


def _error(detail: str, status_code: int) -> Response:
    return Response({"detail": detail}, status=status_code)


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Builds ``OrderService`` with explicitly constructed collaborators.
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Order.objects.all()
    filterset_class = OrderFilter
    ordering_fields = ["order_date", "total_amount", "status"]
    ordering = ["-order_date"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        order_repository = OrderDjangoRepository()
        self._service = OrderService(
            order_repository=order_repository,
            cart_repository=CartDjangoRepository(),
            shipping_resolver=ShippingCostResolver(
                address_repository=AddressDjangoRepository(),
                shipping_cost_repository=ShippingCostDjangoRepository(),
            ),
            notification_gateway=EmailNotificationGateway(),
        )

    def get_throttles(self) -> list[BaseThrottle]:
        """Per-action throttle scopes."""
        throttle_scope: str | None
        if self.action == "create":
            throttle_scope = "order_creation"
        elif self.action == "pay":
            throttle_scope = "order_payment"
        elif self.action in {"list", "retrieve"}:
            throttle_scope = "order_listing"
        else:
            throttle_scope = None
        self.throttle_scope = throttle_scope
        return super().get_throttles()

    def get_queryset(self):
        return self._service.list_orders()

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/

        Prices the user's current cart with the shipping cost of the
        given address.  Returns 409 if the user already has an order.
        """
        create_serializer = CreateOrderSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)
        try:
            dto = parse_create_order(create_serializer.validated_data)
            order = self._service.create_order(dto)
        except InvalidRequest as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)
        except Conflict as exc:
            return _error(str(exc), status.HTTP_409_CONFLICT)
        except NotFound as exc:
            return _error(str(exc), status.HTTP_404_NOT_FOUND)
        except InternalFailure:
            return _error(INTERNAL_ERROR_DETAIL, status.HTTP_500_INTERNAL_SERVER_ERROR)

        out = OrderSerializer(order)
        return Response(out.data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/?user_id=...&status=..."""
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = OrderListSerializer(page, many=True)
            return self.get_paginated_response(serializer.data)
        serializer = OrderListSerializer(queryset, many=True)
        return Response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(pk or "")
        except NotFound:
            return _error("Order not found.", status.HTTP_404_NOT_FOUND)
        except InternalFailure:
            return _error(INTERNAL_ERROR_DETAIL, status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/orders/{pk}/

        Refused with 400 while the user's cart still has items.
        """
        try:
            self._service.delete_order(pk or "")
        except NotFound:
            return _error("Order not found.", status.HTTP_404_NOT_FOUND)
        except PreconditionFailed as exc:
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)
        except InternalFailure:
            return _error(INTERNAL_ERROR_DETAIL, status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Payment (dedicated action)
    # ------------------------------------------------------------------

    @action(detail=True, methods=["post"])
    def pay(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/orders/{pk}/pay/

        Emails the confirmation, clears the cart and retires the order.
        """
        try:
            confirmation = self._service.process_payment(pk or "")
        except NotFound:
            return _error("Order not found.", status.HTTP_404_NOT_FOUND)
        except NotificationFailure as exc:
            return _error(str(exc), status.HTTP_502_BAD_GATEWAY)
        except InternalFailure:
            return _error(INTERNAL_ERROR_DETAIL, status.HTTP_500_INTERNAL_SERVER_ERROR)

        serializer = PaymentConfirmationSerializer(confirmation.model_dump())
        return Response(serializer.data)
