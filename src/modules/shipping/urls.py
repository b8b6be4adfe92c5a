"""Shipping URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.shipping.views import ShippingCostViewSet

router = SimpleRouter(trailing_slash=True)
router.register("shipping-costs", ShippingCostViewSet, basename="shipping-cost")

urlpatterns = router.urls
