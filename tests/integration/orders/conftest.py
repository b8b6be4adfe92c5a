import pytest

ORDERS_URL = "/api/v1/orders/"


@pytest.fixture()
def create_payload(user_id, address):
    return {
        "user_id": user_id,
        "address_id": str(address.id),
        "email": "buyer@example.com",
        "user_name": "Nguyen Van A",
        "phone_number": "0901234567",
        "note": "",
    }


@pytest.fixture()
def placed_order(auth_client, create_payload, shipping_cost, cart_items):
    """An order created through the API; returns the response body."""
    response = auth_client.post(ORDERS_URL, create_payload, format="json")
    assert response.status_code == 201
    return response.data
