"""
Error handling tests for the shared exception handler and numeric helpers.
"""
import pytest
from decimal import Decimal

from core_backend.exceptions import (
    DomainError,
    InvalidQuantity,
    PersistenceError,
    domain_exception_handler,
)
from core_backend.utils.numbers import to_decimal, to_positive_decimal


class TestDomainExceptionHandler:

    def test_domain_error_response(self):
        response = domain_exception_handler(InvalidQuantity("-1"), {})

        assert response.status_code == 400
        assert response.data["code"] == "invalid_quantity"
        assert "'-1'" in response.data["detail"]

    def test_default_message_comes_from_docstring(self):
        assert DomainError().message == "Base exception for business rule violations."

    def test_persistence_error_is_service_unavailable(self):
        response = domain_exception_handler(PersistenceError("inventory"), {})

        assert response.status_code == 503
        assert response.data["code"] == "persistence_failed"
        assert "inventory" in response.data["detail"]

    def test_other_exceptions_fall_through(self):
        assert domain_exception_handler(RuntimeError("boom"), {}) is None


class TestNumbers:

    @pytest.mark.parametrize("value, expected", [
        ("10", Decimal("10")),
        (" 2.5 ", Decimal("2.5")),
        (0.1, Decimal("0.1")),
        (3, Decimal("3")),
        ("-4", Decimal("-4")),
    ])
    def test_to_decimal(self, value, expected):
        assert to_decimal(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "NaN", "Infinity", True, [1]])
    def test_to_decimal_rejects(self, value):
        assert to_decimal(value) is None

    @pytest.mark.parametrize("value", ["0", "-1", None])
    def test_to_positive_decimal_rejects(self, value):
        assert to_positive_decimal(value) is None


@pytest.mark.django_db
class TestHealthAndAuth:

    def test_health_check_is_public(self, api_client):
        response = api_client.get("/api/health/")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_token_obtain(self, api_client, user):
        response = api_client.post(
            "/api/auth/token/",
            {"username": "atelier", "password": "test-password-123"},
            format="json",
        )

        assert response.status_code == 200
        assert "access" in response.json()
        assert "refresh" in response.json()
