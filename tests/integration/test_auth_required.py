"""Every order endpoint rejects unauthenticated requests."""

from __future__ import annotations

from uuid import uuid4

import pytest

pytestmark = pytest.mark.integration


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("get", "/api/v1/orders/"),
        ("post", "/api/v1/orders/"),
        ("get", f"/api/v1/orders/{uuid4()}/"),
        ("delete", f"/api/v1/orders/{uuid4()}/"),
        ("post", f"/api/v1/orders/{uuid4()}/pay/"),
    ],
)
def test_unauthenticated_request_rejected(api_client, method, path):
    response = getattr(api_client, method)(path)
    assert response.status_code == 401
