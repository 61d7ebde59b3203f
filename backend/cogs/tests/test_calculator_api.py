"""
API tests for the calculator endpoints.
"""
import pytest


@pytest.mark.django_db
class TestCalculatorAPI:

    def test_requires_authentication(self, api_client):
        response = api_client.post("/api/cogs/pricing/", {"total_cost": 20}, format="json")
        assert response.status_code == 401

    def test_usage_cost(self, authenticated_client):
        """Scenario: 1 kg of wax for R$50, 90 g per candle."""
        response = authenticated_client.post(
            "/api/cogs/usage-cost/",
            {
                "name": "Cera",
                "purchase_price": 50,
                "purchase_quantity": 1,
                "purchase_unit": "kg",
                "usage_quantity": 90,
                "usage_unit": "g",
            },
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["cost"] == 4.5
        assert response.json()["warnings"] == []

    def test_usage_cost_invalid_input(self, authenticated_client):
        response = authenticated_client.post(
            "/api/cogs/usage-cost/",
            {
                "purchase_price": "",
                "purchase_quantity": 1,
                "purchase_unit": "kg",
                "usage_quantity": 90,
                "usage_unit": "g",
            },
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_cost_input"

    def test_usage_cost_unit_mismatch_is_a_warning(self, authenticated_client):
        response = authenticated_client.post(
            "/api/cogs/usage-cost/",
            {
                "purchase_price": 80,
                "purchase_quantity": 1,
                "purchase_unit": "kg",
                "usage_quantity": 10,
                "usage_unit": "ml",
            },
            format="json",
        )

        assert response.status_code == 200
        assert len(response.json()["warnings"]) == 1

    def test_pricing(self, authenticated_client):
        response = authenticated_client.post(
            "/api/cogs/pricing/", {"total_cost": "20", "margin_percent": "150"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["selling_price"] == 50.0
        assert response.json()["profit"] == 30.0

    def test_cost_sheet(self, authenticated_client):
        response = authenticated_client.post(
            "/api/cogs/cost-sheet/",
            {
                "margin_percent": 100,
                "lines": [
                    {"name": "Cera", "purchase_price": 50, "purchase_quantity": 1,
                     "purchase_unit": "kg", "usage_quantity": 90, "usage_unit": "g"},
                    {"name": "Pavio", "purchase_price": 10, "purchase_quantity": 20,
                     "purchase_unit": "un", "usage_quantity": 1, "usage_unit": "un"},
                ],
            },
            format="json",
        )

        data = response.json()
        assert response.status_code == 200
        assert data["total_cost"] == 5.0
        assert data["selling_price"] == 10.0
        assert data["is_complete"] is True

    def test_production_mix(self, authenticated_client):
        response = authenticated_client.post(
            "/api/cogs/production-mix/",
            {"container_size": 200, "fragrance_percent": 10, "quantity": 1},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["wax_amount"] == 181.8

    def test_production_mix_invalid(self, authenticated_client):
        response = authenticated_client.post(
            "/api/cogs/production-mix/",
            {"container_size": 0, "fragrance_percent": 10},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_quantity"
