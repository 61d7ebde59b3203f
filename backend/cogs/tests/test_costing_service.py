"""
Tests for the material usage-cost calculator and cost sheets.
"""
import pytest
from decimal import Decimal

from cogs.exceptions import UnitMismatchWarning, UnknownUnit
from cogs.services import (
    CostingService,
    MaterialLine,
    compute_usage_cost,
    require_unit,
    unit_mismatch_warning,
)
from measurements.services import lookup
from products.records import RecipeItemData


class TestComputeUsageCost:
    """Tests for compute_usage_cost."""

    def test_wax_bought_per_kg_used_in_grams(self):
        """R$50 for 1 kg of wax, 90 g per candle costs R$4.50."""
        assert compute_usage_cost(50, 1, "kg", 90, "g") == Decimal("4.5")

    def test_accepts_unit_definitions(self):
        """Units can be passed as registry definitions instead of symbols."""
        cost = compute_usage_cost("50", "1", lookup("kg"), "90", lookup("g"))
        assert cost == Decimal("4.5")

    def test_volume_conversion(self):
        """R$120 for 1 l of fragrance, 5 ml used costs R$0.60."""
        assert compute_usage_cost(120, 1, "l", 5, "ml") == Decimal("0.6")

    @pytest.mark.parametrize("usage", ["10", "33", "90", "250.5"])
    def test_cost_is_linear_in_usage(self, usage):
        """Doubling the usage doubles the cost."""
        single = compute_usage_cost(50, 1, "kg", usage, "g")
        double = compute_usage_cost(50, 1, "kg", Decimal(usage) * 2, "g")
        assert double == single * 2

    @pytest.mark.parametrize("price,bought,used", [
        (None, 1, 90),
        (50, None, 90),
        (50, 1, None),
        (0, 1, 90),
        (50, 0, 90),
        (50, 1, 0),
        (-50, 1, 90),
        ("abc", 1, 90),
        (50, "", 90),
        (50, 1, float("nan")),
    ])
    def test_invalid_numbers_are_invalid(self, price, bought, used):
        """Missing, zero, negative or non-numeric inputs produce no cost."""
        assert compute_usage_cost(price, bought, "kg", used, "g") is None

    def test_unknown_unit_is_invalid(self):
        """A unit missing from the registry makes the computation invalid."""
        assert compute_usage_cost(50, 1, "arroba", 90, "g") is None
        assert compute_usage_cost(50, 1, "kg", 90, None) is None

    def test_cross_group_still_computes(self):
        """Mass bought, volume used: a number is still produced (1:1 density)."""
        assert compute_usage_cost(50, 1, "kg", 90, "ml") == Decimal("4.5")


class TestUnitChecks:
    """Tests for unit helpers."""

    def test_require_unit_raises_for_unknown_symbol(self):
        """Strict lookup raises UnknownUnit."""
        with pytest.raises(UnknownUnit) as exc_info:
            require_unit("arroba")

        assert exc_info.value.code == "unknown_unit"
        assert "arroba" in exc_info.value.message

    def test_mismatch_warning_only_across_groups(self):
        """Same-group pairs are fine, mass vs volume is flagged."""
        assert unit_mismatch_warning(lookup("kg"), lookup("g")) is None

        warning = unit_mismatch_warning(lookup("kg"), lookup("ml"))
        assert isinstance(warning, UnitMismatchWarning)
        assert isinstance(warning, UserWarning)
        assert "kg" in str(warning) and "ml" in str(warning)


class TestCostingService:
    """Tests for the CostingService."""

    def test_cost_material_valid_line(self):
        """A valid line carries the cost and no warnings."""
        result = CostingService.cost_material(
            MaterialLine("Cera de Coco", 50, 1, "kg", 90, "g")
        )

        assert result.is_valid
        assert result.cost == Decimal("4.5")
        assert result.cost_display == Decimal("4.50")
        assert result.warnings == []
        assert result.error is None

    def test_cost_material_unit_mismatch_attaches_warning(self):
        """Cross-group lines are valid with a warning attached."""
        result = CostingService.cost_material(
            MaterialLine("Essência", 80, 1, "kg", 10, "ml")
        )

        assert result.is_valid
        assert result.cost == Decimal("0.8")
        assert len(result.warnings) == 1

    def test_cost_material_unknown_unit(self):
        """Unknown units produce an invalid line naming the unit."""
        result = CostingService.cost_material(
            MaterialLine("Corante", 10, 1, "frasco", 2, "g")
        )

        assert not result.is_valid
        assert result.cost is None
        assert "frasco" in result.error

    def test_cost_material_invalid_numbers(self):
        """Zero quantities produce an invalid line."""
        result = CostingService.cost_material(MaterialLine("Pavio", 10, 0, "un", 1, "un"))

        assert not result.is_valid
        assert result.error

    def test_build_cost_sheet(self):
        """Totals, price and profit are derived from the valid lines."""
        sheet = CostingService.build_cost_sheet(
            [
                MaterialLine("Cera", 50, 1, "kg", 200, "g"),
                MaterialLine("Essência", 100, 1, "l", 20, "ml"),
                MaterialLine("Pavio", 10, 10, "un", 1, "un"),
                MaterialLine("Pote", 80, 10, "un", 1, "un"),
            ],
            margin_percent=150,
        )

        # 10 + 2 + 1 + 8
        assert sheet.total_cost == Decimal("21")
        assert sheet.selling_price == Decimal("52.5")
        assert sheet.profit == Decimal("31.5")
        assert sheet.is_complete
        assert sheet.warnings == []

    def test_build_cost_sheet_excludes_invalid_lines(self):
        """Invalid lines are reported but not summed."""
        sheet = CostingService.build_cost_sheet(
            [
                MaterialLine("Cera", 50, 1, "kg", 90, "g"),
                MaterialLine("Sem preço", None, 1, "kg", 90, "g"),
            ],
        )

        assert sheet.total_cost == Decimal("4.5")
        assert not sheet.is_complete
        assert [line.name for line in sheet.invalid_lines] == ["Sem preço"]
        assert sheet.selling_price == Decimal("4.5")

    def test_build_cost_sheet_collects_warnings(self):
        """Unit mismatch advisories bubble up to the sheet."""
        sheet = CostingService.build_cost_sheet(
            [MaterialLine("Essência", 80, 1, "kg", 10, "ml")], margin_percent=0
        )
        assert len(sheet.warnings) == 1

    def test_recipe_material_lines(self, wax, fragrance, lavender_candle):
        """Recipe lines use the item's unit and mark deleted items as unknown."""
        product = lavender_candle.with_recipe(
            lavender_candle.recipe + (RecipeItemData("gone", Decimal("1")),)
        )
        purchases = {
            wax.id: {"price": 50, "quantity": 1, "unit": "kg"},
            fragrance.id: {"price": 100, "quantity": 1, "unit": "l"},
        }

        lines = CostingService.recipe_material_lines(product, [wax, fragrance], purchases)
        sheet = CostingService.build_cost_sheet(lines)

        assert [line.name for line in lines] == ["Cera de Coco", "Essência Lavanda", "Item desconhecido"]
        # 30 g of wax at R$0.05/g + 5 ml of fragrance at R$0.10/ml
        assert sheet.total_cost == Decimal("2.0")
        assert not sheet.is_complete
