"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest
from decimal import Decimal


# ============================================================================
# USER FIXTURES
# ============================================================================

@pytest.fixture
def user(db):
    """Owner of the shop's data."""
    from django.contrib.auth import get_user_model
    return get_user_model().objects.create_user(
        username="atelier",
        email="atelier@example.com",
        password="test-password-123",
    )


@pytest.fixture
def other_user(db):
    """A second account, used to check that data does not leak between scopes."""
    from django.contrib.auth import get_user_model
    return get_user_model().objects.create_user(
        username="outra-loja",
        email="outra@example.com",
        password="test-password-123",
    )


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """
    Provide DRF API client for API tests.

    Usage:
        def test_my_api(api_client):
            response = api_client.get('/api/health/')
            assert response.status_code == 200
    """
    from rest_framework.test import APIClient
    return APIClient()


def _bearer_client(user):
    from rest_framework.test import APIClient
    from rest_framework_simplejwt.tokens import RefreshToken

    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {refresh.access_token}")
    return client


@pytest.fixture
def authenticated_client(user):
    """
    Provide API client authenticated with a JWT for ``user``.

    Usage:
        def test_protected_endpoint(authenticated_client):
            response = authenticated_client.get('/api/orders/')
            assert response.status_code == 200
    """
    return _bearer_client(user)


@pytest.fixture
def other_client(other_user):
    """API client authenticated as ``other_user``."""
    return _bearer_client(other_user)


# ============================================================================
# DOMAIN FIXTURES
# ============================================================================

@pytest.fixture
def wax():
    from inventory.records import InventoryItemData
    return InventoryItemData.create(
        name="Cera de Coco", quantity=Decimal("1000"), unit="g", category="Cera",
        min_threshold=Decimal("200"),
    )


@pytest.fixture
def fragrance():
    from inventory.records import InventoryItemData
    return InventoryItemData.create(
        name="Essência Lavanda", quantity=Decimal("200"), unit="ml", category="Essência",
        min_threshold=Decimal("50"),
    )


@pytest.fixture
def wick():
    from inventory.records import InventoryItemData
    return InventoryItemData.create(name="Pavio", quantity=Decimal("40"), unit="un", category="Pavio")


@pytest.fixture
def lavender_candle(wax, fragrance):
    """Candle whose recipe uses 30 g of wax and 5 ml of fragrance per unit."""
    from products.records import ProductData
    from products.services import build_recipe
    return ProductData.create(
        name="Vela Lavanda",
        price=Decimal("35.00"),
        recipe=build_recipe([(wax.id, "30"), (fragrance.id, "5")]),
    )
