"""
Unit conversion table.

A fixed, in-memory registry mapping unit symbols to their group and their
factor to the group's base unit. Every costing and stock computation goes
through ``lookup``; unknown symbols resolve to ``None`` and callers treat the
computation as invalid.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from measurements.models import UnitCategory


@dataclass(frozen=True)
class UnitDefinition:
    """A unit symbol with its group and conversion factor to the base unit."""
    code: str
    name: str
    group: str
    factor_to_base: Decimal

    @property
    def is_base(self) -> bool:
        return self.factor_to_base == 1

    def to_base(self, quantity: Decimal) -> Decimal:
        return quantity * self.factor_to_base

    def from_base(self, quantity: Decimal) -> Decimal:
        return quantity / self.factor_to_base


# Canonical base unit per group
BASE_UNITS = {
    UnitCategory.MASS: "g",
    UnitCategory.VOLUME: "ml",
    UnitCategory.COUNT: "un",
}


DEFAULT_UNITS = [
    # Mass units
    UnitDefinition("g", "gram", UnitCategory.MASS, Decimal("1")),
    UnitDefinition("kg", "kilogram", UnitCategory.MASS, Decimal("1000")),
    UnitDefinition("mg", "milligram", UnitCategory.MASS, Decimal("0.001")),
    UnitDefinition("oz", "ounce", UnitCategory.MASS, Decimal("28.349523125")),
    UnitDefinition("lb", "pound", UnitCategory.MASS, Decimal("453.59237")),

    # Volume units
    UnitDefinition("ml", "milliliter", UnitCategory.VOLUME, Decimal("1")),
    UnitDefinition("l", "liter", UnitCategory.VOLUME, Decimal("1000")),
    UnitDefinition("fl_oz", "fluid ounce", UnitCategory.VOLUME, Decimal("29.5735295625")),
    UnitDefinition("cup", "cup", UnitCategory.VOLUME, Decimal("240")),
    UnitDefinition("gal", "gallon", UnitCategory.VOLUME, Decimal("3785.411784")),

    # Count units
    UnitDefinition("un", "unit", UnitCategory.COUNT, Decimal("1")),
    UnitDefinition("dozen", "dozen", UnitCategory.COUNT, Decimal("12")),
]

UNIT_TABLE = {unit.code: unit for unit in DEFAULT_UNITS}


# Common spellings (English and Portuguese) mapped to canonical codes
UNIT_STRING_MAPPINGS = {
    # Mass - grams
    "g": "g",
    "gr": "g",
    "gram": "g",
    "grams": "g",
    "grama": "g",
    "gramas": "g",
    # Mass - kilograms
    "kg": "kg",
    "kilo": "kg",
    "kilos": "kg",
    "quilo": "kg",
    "quilos": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "quilograma": "kg",
    "quilogramas": "kg",
    # Mass - milligrams
    "mg": "mg",
    "milligram": "mg",
    "milligrams": "mg",
    "miligrama": "mg",
    "miligramas": "mg",
    # Mass - ounces / pounds
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
    # Volume - milliliters
    "ml": "ml",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "mililitro": "ml",
    "mililitros": "ml",
    # Volume - liters
    "l": "l",
    "lt": "l",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litro": "l",
    "litros": "l",
    # Volume - others
    "fl_oz": "fl_oz",
    "fl oz": "fl_oz",
    "fluid ounce": "fl_oz",
    "cup": "cup",
    "cups": "cup",
    "xicara": "cup",
    "xícara": "cup",
    "gal": "gal",
    "gallon": "gal",
    "gallons": "gal",
    # Count
    "un": "un",
    "und": "un",
    "unit": "un",
    "units": "un",
    "unidade": "un",
    "unidades": "un",
    "each": "un",
    "ea": "un",
    "piece": "un",
    "pieces": "un",
    "pc": "un",
    "pcs": "un",
    "peça": "un",
    "peças": "un",
    "dozen": "dozen",
    "dz": "dozen",
    "duzia": "dozen",
    "dúzia": "dozen",
}


def map_unit_string_to_code(unit_string: str) -> Optional[str]:
    """
    Map a unit string to its canonical code.

    Args:
        unit_string: The unit string to map (e.g., "gramas", "kg", "unidade")

    Returns:
        Canonical unit code if found, None otherwise.
    """
    if not unit_string:
        return None

    normalized = unit_string.strip().lower()
    return UNIT_STRING_MAPPINGS.get(normalized)


def lookup(symbol: str) -> Optional[UnitDefinition]:
    """
    Resolve a unit symbol (or a known spelling of it) to its definition.

    Returns None for unknown symbols.
    """
    code = map_unit_string_to_code(symbol)
    if code is None:
        return None
    return UNIT_TABLE.get(code)
