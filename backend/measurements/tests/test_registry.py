"""
Tests for the unit conversion table.
"""
import pytest
from decimal import Decimal

from measurements.models import Unit, UnitCategory
from measurements.services import (
    BASE_UNITS,
    DEFAULT_UNITS,
    lookup,
    map_unit_string_to_code,
)
from measurements.services.seeding import seed_units


class TestUnitRegistry:
    """Pure lookups against the in-memory registry."""

    @pytest.mark.parametrize("code", ["kg", "g", "l", "ml", "un"])
    def test_required_units_are_registered(self, code):
        """The core units are always available."""
        assert lookup(code) is not None
        assert lookup(code).code == code

    def test_base_units_have_factor_one(self):
        """g, ml and un are the base units of their groups."""
        for group, code in BASE_UNITS.items():
            unit = lookup(code)
            assert unit.group == group
            assert unit.factor_to_base == Decimal("1")
            assert unit.is_base

    def test_every_group_has_exactly_one_base_unit(self):
        """Each group's base unit is the only unit with factor 1."""
        for group in BASE_UNITS:
            bases = [unit.code for unit in DEFAULT_UNITS if unit.group == group and unit.is_base]
            assert bases == [BASE_UNITS[group]]

    def test_factors_are_positive(self):
        """Every factor converts to a positive base quantity."""
        assert all(unit.factor_to_base > 0 for unit in DEFAULT_UNITS)

    def test_kilogram_and_liter_factors(self):
        """1 kg is 1000 g and 1 l is 1000 ml."""
        assert lookup("kg").to_base(Decimal("1")) == Decimal("1000")
        assert lookup("l").to_base(Decimal("2")) == Decimal("2000")
        assert lookup("kg").from_base(Decimal("500")) == Decimal("0.5")

    @pytest.mark.parametrize("spelling,code", [
        ("KG", "kg"),
        (" gramas ", "g"),
        ("litro", "l"),
        ("unidade", "un"),
        ("mL", "ml"),
    ])
    def test_lookup_accepts_common_spellings(self, spelling, code):
        """Case, whitespace and Portuguese names resolve to the canonical code."""
        assert map_unit_string_to_code(spelling) == code
        assert lookup(spelling).code == code

    @pytest.mark.parametrize("symbol", ["", None, "xyz", "colher"])
    def test_unknown_symbols_are_not_found(self, symbol):
        """Unknown symbols resolve to None instead of raising."""
        assert lookup(symbol) is None


@pytest.mark.django_db
class TestUnitSeeding:
    """The units table mirrors the registry."""

    def test_migration_seeds_default_units(self):
        """The initial migration seeds every registry unit."""
        codes = set(Unit.objects.values_list("code", flat=True))
        assert {unit.code for unit in DEFAULT_UNITS} <= codes

    def test_seed_units_is_idempotent(self):
        """Seeding twice does not create duplicates."""
        seed_units()
        unit_map = seed_units()

        assert Unit.objects.filter(code="kg").count() == 1
        assert unit_map["kg"].factor_to_base == Decimal("1000")
        assert unit_map["kg"].category == UnitCategory.MASS

    def test_units_endpoint_lists_units(self, authenticated_client):
        """Units are readable by any authenticated user."""
        response = authenticated_client.get("/api/measurements/units/", {"category": "volume"})

        assert response.status_code == 200
        codes = [unit["code"] for unit in response.json()]
        assert "ml" in codes
        assert "kg" not in codes
