"""
Orders API integration tests.
"""
import pytest
from datetime import timedelta

from django.utils import timezone

from orders.models import Order

ORDERS_URL = "/api/orders/"


def order_payload(**overrides):
    payload = {
        "customer_name": "Ana",
        "description": "20 velas de lembrancinha",
        "estimated_value": "300",
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestOrdersAPI:

    def test_create_order(self, authenticated_client, user):
        response = authenticated_client.post(ORDERS_URL, order_payload(), format="json")

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "PENDING"
        assert data["status_display"] == "Pendente"
        assert data["estimated_value"] == 300.0
        assert data["deadline"] is not None
        assert Order.objects.filter(owner=user).count() == 1

    def test_status_cannot_be_set_on_create(self, authenticated_client):
        response = authenticated_client.post(
            ORDERS_URL, order_payload(status="DELIVERED"), format="json"
        )

        assert response.status_code == 201
        assert response.json()["status"] == "PENDING"

    def test_short_description_rejected(self, authenticated_client):
        response = authenticated_client.post(
            ORDERS_URL, order_payload(description="vela"), format="json"
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_order"

    def test_past_deadline_rejected(self, authenticated_client):
        yesterday = (timezone.now() - timedelta(days=1)).isoformat()
        response = authenticated_client.post(
            ORDERS_URL, order_payload(deadline=yesterday), format="json"
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_order"

    def test_negative_value_rejected(self, authenticated_client):
        response = authenticated_client.post(
            ORDERS_URL, order_payload(estimated_value="-10"), format="json"
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_quantity"

    def test_update_status(self, authenticated_client):
        order_id = authenticated_client.post(ORDERS_URL, order_payload(), format="json").json()["id"]

        response = authenticated_client.post(
            f"{ORDERS_URL}{order_id}/status/", {"status": "IN_PROGRESS"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["status_display"] == "Em Produção"

    def test_invalid_status_rejected(self, authenticated_client):
        order_id = authenticated_client.post(ORDERS_URL, order_payload(), format="json").json()["id"]

        response = authenticated_client.post(
            f"{ORDERS_URL}{order_id}/status/", {"status": "CANCELLED"}, format="json"
        )

        assert response.status_code == 400

    def test_partial_update(self, authenticated_client):
        order_id = authenticated_client.post(ORDERS_URL, order_payload(), format="json").json()["id"]

        response = authenticated_client.patch(
            f"{ORDERS_URL}{order_id}/", {"estimated_value": "350.50"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["estimated_value"] == 350.5
        assert response.json()["description"] == "20 velas de lembrancinha"

    def test_list_sorted_by_deadline_and_filtered(self, authenticated_client):
        now = timezone.now()
        late = authenticated_client.post(
            ORDERS_URL, order_payload(deadline=(now + timedelta(days=20)).isoformat()), format="json"
        ).json()
        soon = authenticated_client.post(
            ORDERS_URL, order_payload(deadline=(now + timedelta(days=2)).isoformat()), format="json"
        ).json()
        authenticated_client.post(f"{ORDERS_URL}{soon['id']}/status/", {"status": "COMPLETED"}, format="json")

        listed = authenticated_client.get(ORDERS_URL).json()
        pending = authenticated_client.get(ORDERS_URL, {"status": "PENDING"}).json()

        assert [order["id"] for order in listed] == [soon["id"], late["id"]]
        assert [order["id"] for order in pending] == [late["id"]]

    def test_other_accounts_cannot_see_order(self, authenticated_client, other_client):
        order_id = authenticated_client.post(ORDERS_URL, order_payload(), format="json").json()["id"]

        assert other_client.get(f"{ORDERS_URL}{order_id}/").status_code == 404
        assert other_client.get(ORDERS_URL).json() == []
