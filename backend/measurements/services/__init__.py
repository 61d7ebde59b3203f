"""
Measurements services.
"""
from measurements.services.registry import (
    UnitDefinition,
    DEFAULT_UNITS,
    UNIT_TABLE,
    UNIT_STRING_MAPPINGS,
    BASE_UNITS,
    lookup,
    map_unit_string_to_code,
)

__all__ = [
    'UnitDefinition',
    'DEFAULT_UNITS',
    'UNIT_TABLE',
    'UNIT_STRING_MAPPINGS',
    'BASE_UNITS',
    'lookup',
    'map_unit_string_to_code',
]
