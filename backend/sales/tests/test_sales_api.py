"""
Sales API integration tests.
"""
import pytest
from decimal import Decimal

from inventory.repositories import InventoryRepository
from products.repositories import ProductRepository
from sales.models import Sale

SALES_URL = "/api/sales/"
FINALIZE_URL = "/api/sales/finalize/"
SUMMARY_URL = "/api/sales/summary/"


@pytest.fixture
def stocked(user, wax, fragrance, wick, lavender_candle):
    InventoryRepository().save_all([wax, fragrance, wick], user.pk)
    ProductRepository().save_all([lavender_candle], user.pk)
    return {"wax": wax, "fragrance": fragrance, "wick": wick, "candle": lavender_candle}


@pytest.mark.django_db
class TestFinalizeSale:

    def test_finalize_deducts_recipe_and_records_sale(self, authenticated_client, user, stocked):
        response = authenticated_client.post(FINALIZE_URL, {
            "customer_name": "Maria",
            "entries": [
                {"kind": "product", "reference_id": stocked["candle"].id, "quantity": "5"},
                {"kind": "inventory_item", "reference_id": stocked["wick"].id, "quantity": "2",
                 "unit_price": "1.50"},
            ],
        }, format="json")

        assert response.status_code == 201
        data = response.json()
        assert data["sale"]["description"] == "5x Vela Lavanda, 2x Pavio"
        assert data["sale"]["total_value"] == 178.0
        assert len(data["movements"]) == 3
        assert data["skipped"] == []

        stock = {item.name: item.quantity for item in InventoryRepository().load_all(user.pk)}
        assert stock == {
            "Cera de Coco": Decimal("850"),
            "Essência Lavanda": Decimal("175"),
            "Pavio": Decimal("38"),
        }

    def test_repeated_entries_are_merged(self, authenticated_client, stocked):
        candle_id = stocked["candle"].id
        response = authenticated_client.post(FINALIZE_URL, {
            "customer_name": "Maria",
            "entries": [
                {"kind": "product", "reference_id": candle_id, "quantity": "1"},
                {"kind": "product", "reference_id": candle_id, "quantity": "2"},
            ],
        }, format="json")

        assert response.status_code == 201
        assert response.json()["sale"]["description"] == "3x Vela Lavanda"

    def test_oversold_item_is_clamped(self, authenticated_client, user, stocked):
        response = authenticated_client.post(FINALIZE_URL, {
            "customer_name": "Maria",
            "entries": [{"kind": "inventory_item", "reference_id": stocked["wick"].id, "quantity": "50"}],
        }, format="json")

        assert response.status_code == 201
        assert response.json()["movements"][0]["was_clamped"] is True
        wick = next(item for item in InventoryRepository().load_all(user.pk) if item.name == "Pavio")
        assert wick.quantity == Decimal("0")

    def test_unknown_reference_is_reported(self, authenticated_client, stocked):
        response = authenticated_client.post(FINALIZE_URL, {
            "customer_name": "Maria",
            "entries": [{"kind": "product", "reference_id": "apagado", "quantity": "1",
                         "unit_price": "20", "name": "Vela antiga"}],
        }, format="json")

        assert response.status_code == 201
        assert response.json()["skipped"] == [{"kind": "product", "reference_id": "apagado"}]

    def test_short_customer_name_rejected(self, authenticated_client, user, stocked):
        response = authenticated_client.post(FINALIZE_URL, {
            "customer_name": "M",
            "entries": [{"kind": "product", "reference_id": stocked["candle"].id, "quantity": "1"}],
        }, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_sale"
        assert not Sale.objects.filter(owner=user).exists()

    def test_empty_cart_rejected(self, authenticated_client, stocked):
        response = authenticated_client.post(
            FINALIZE_URL, {"customer_name": "Maria", "entries": []}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_sale"

    @pytest.mark.parametrize("quantity", ["0", "-2", "muitos", ""])
    def test_invalid_quantity_rejected(self, authenticated_client, user, stocked, quantity):
        response = authenticated_client.post(FINALIZE_URL, {
            "customer_name": "Maria",
            "entries": [{"kind": "product", "reference_id": stocked["candle"].id, "quantity": quantity}],
        }, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_quantity"
        wax = next(item for item in InventoryRepository().load_all(user.pk) if item.name == "Cera de Coco")
        assert wax.quantity == Decimal("1000")


    @pytest.mark.parametrize("entry", [
        {"quantity": "1e15"},
        {"quantity": "1", "unit_price": "1e12"},
        {"quantity": "9999999999", "unit_price": "9999"},
    ])
    def test_oversized_values_rejected_before_saving(self, authenticated_client, user, stocked, entry):
        response = authenticated_client.post(FINALIZE_URL, {
            "customer_name": "Maria",
            "entries": [{"kind": "inventory_item", "reference_id": stocked["wax"].id, **entry}],
        }, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_quantity"
        wax = next(item for item in InventoryRepository().load_all(user.pk) if item.name == "Cera de Coco")
        assert wax.quantity == Decimal("1000")
        assert not Sale.objects.filter(owner=user).exists()

    def test_large_clamped_sale_reports_movements(self, authenticated_client, user, stocked):
        """Selling far more than the stock still answers with the clamped movement."""
        response = authenticated_client.post(FINALIZE_URL, {
            "customer_name": "Maria",
            "entries": [{"kind": "product", "reference_id": stocked["candle"].id,
                         "quantity": "9999999999", "unit_price": "0.01"}],
        }, format="json")

        assert response.status_code == 201
        movements = response.json()["movements"]
        assert all(movement["was_clamped"] for movement in movements)
        assert movements[0]["requested"] == 299999999970.0
        assert movements[0]["new_quantity"] == 0.0


@pytest.mark.django_db
class TestSalesAPI:

    def test_register_manual_sale(self, authenticated_client, user, stocked):
        response = authenticated_client.post(SALES_URL, {
            "customer_name": "Joana",
            "description": "Kit presente",
            "total_value": "89.90",
        }, format="json")

        assert response.status_code == 201
        assert response.json()["total_value"] == 89.9
        wax = next(item for item in InventoryRepository().load_all(user.pk) if item.name == "Cera de Coco")
        assert wax.quantity == Decimal("1000")

    def test_manual_sale_needs_positive_total(self, authenticated_client):
        response = authenticated_client.post(SALES_URL, {
            "customer_name": "Joana", "description": "Kit", "total_value": "0",
        }, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_quantity"

    def test_sales_cannot_be_edited(self, authenticated_client):
        created = authenticated_client.post(SALES_URL, {
            "customer_name": "Joana", "description": "Kit", "total_value": "10",
        }, format="json").json()

        response = authenticated_client.patch(
            f"{SALES_URL}{created['id']}/", {"total_value": "1"}, format="json"
        )

        assert response.status_code == 405

    def test_list_is_scoped_to_owner(self, authenticated_client, other_client):
        authenticated_client.post(SALES_URL, {
            "customer_name": "Joana", "description": "Kit", "total_value": "10",
        }, format="json")

        assert len(authenticated_client.get(SALES_URL).json()) == 1
        assert other_client.get(SALES_URL).json() == []

    def test_summary(self, authenticated_client):
        for total in ("10", "25.50"):
            authenticated_client.post(SALES_URL, {
                "customer_name": "Joana", "description": "Kit", "total_value": total,
            }, format="json")

        response = authenticated_client.get(SUMMARY_URL, {"days": "7"})

        assert response.status_code == 200
        data = response.json()
        assert data["total_revenue"] == 35.5
        assert data["sales_count"] == 2
        assert data["last_sale_date"] is not None
        assert len(data["daily_totals"]) == 1
        assert data["daily_totals"][0]["total"] == 35.5

    def test_summary_without_sales(self, authenticated_client):
        data = authenticated_client.get(SUMMARY_URL).json()

        assert data["sales_count"] == 0
        assert data["last_sale_date"] is None
        assert data["daily_totals"] == []

    def test_requires_authentication(self, api_client):
        assert api_client.get(SALES_URL).status_code == 401
