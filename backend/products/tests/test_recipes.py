"""
Recipe composition tests.
"""
import pytest
from decimal import Decimal

from core_backend.exceptions import InvalidQuantity
from products.exceptions import DuplicateIngredient
from products.records import ProductData, RecipeItemData
from products.services import (
    ProductService,
    add_ingredient,
    build_recipe,
    describe_recipe,
    remove_ingredient,
)


class TestRecipeComposition:

    def test_add_ingredient_appends_in_order(self, wax, fragrance, wick):
        recipe = add_ingredient((), wax.id, "30")
        recipe = add_ingredient(recipe, fragrance.id, 5)
        recipe = add_ingredient(recipe, wick.id, Decimal("1"))

        assert [item.inventory_item_id for item in recipe] == [wax.id, fragrance.id, wick.id]
        assert recipe[0].quantity == Decimal("30")

    def test_duplicate_ingredient_is_rejected(self, wax, fragrance):
        recipe = build_recipe([(wax.id, 30), (fragrance.id, 5)])
        before = tuple(recipe)

        with pytest.raises(DuplicateIngredient) as exc_info:
            add_ingredient(recipe, wax.id, 10)

        assert exc_info.value.code == "duplicate_ingredient"
        assert recipe == before
        assert len(recipe) == 2

    @pytest.mark.parametrize("quantity", [None, "", 0, "0", -3, "abc"])
    def test_non_positive_quantity_is_rejected(self, wax, quantity):
        with pytest.raises(InvalidQuantity):
            add_ingredient((), wax.id, quantity)

    def test_remove_ingredient(self, wax, fragrance, wick):
        recipe = build_recipe([(wax.id, 30), (fragrance.id, 5), (wick.id, 1)])

        recipe = remove_ingredient(recipe, fragrance.id)

        assert [item.inventory_item_id for item in recipe] == [wax.id, wick.id]

    def test_remove_missing_ingredient_is_a_no_op(self, wax):
        recipe = build_recipe([(wax.id, 30)])
        assert remove_ingredient(recipe, "not-there") == recipe


class TestRecipeDisplay:

    def test_describe_recipe_resolves_names_and_units(self, wax, fragrance, lavender_candle):
        lines = describe_recipe(lavender_candle.recipe, [wax, fragrance])

        assert [(line.name, line.quantity, line.unit) for line in lines] == [
            ("Cera de Coco", Decimal("30"), "g"),
            ("Essência Lavanda", Decimal("5"), "ml"),
        ]
        assert not any(line.is_dangling for line in lines)

    def test_deleted_items_render_as_unknown(self, wax, lavender_candle):
        lines = describe_recipe(lavender_candle.recipe, [wax])

        assert lines[1].name == "Item desconhecido"
        assert lines[1].is_dangling
        assert lines[1].unit is None


class TestRecipeCostEstimate:

    def test_estimate_with_all_costs(self, wax, fragrance, lavender_candle):
        estimate = ProductService.estimate_recipe_cost(
            lavender_candle,
            [wax, fragrance],
            {wax.id: Decimal("0.05"), fragrance.id: "0.10"},
        )

        assert estimate.total_cost == Decimal("2.0")
        assert estimate.is_complete

    def test_missing_costs_and_dangling_lines(self, wax, lavender_candle):
        candle = lavender_candle.with_recipe(
            lavender_candle.recipe + (RecipeItemData("deleted-item", Decimal("2")),)
        )

        estimate = ProductService.estimate_recipe_cost(candle, [wax], {})

        assert estimate.total_cost == Decimal("0")
        assert estimate.missing_costs == [wax.id]
        assert len(estimate.dangling) == 2
        assert not estimate.is_complete

    def test_recipe_cost_sheet(self, wax, fragrance, lavender_candle):
        sheet = ProductService.recipe_cost_sheet(
            lavender_candle,
            [wax, fragrance],
            {
                wax.id: {"price": 50, "quantity": 1, "unit": "kg"},
                fragrance.id: {"price": 100, "quantity": 1, "unit": "l"},
            },
            margin_percent=100,
        )

        assert sheet.total_cost == Decimal("2.0")
        assert sheet.selling_price == Decimal("4.0")
        assert sheet.is_complete


class TestProductData:

    def test_create_assigns_id(self):
        product = ProductData.create("Vela", "29.90")
        assert product.id
        assert product.price == Decimal("29.90")
        assert product.recipe == ()
