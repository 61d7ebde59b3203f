"""
Unit seeding service for measurements.

Units are GLOBAL (not per-account), seeded once on deployment from the
in-memory registry so the table and the registry never disagree.
"""
import logging

from measurements.models import Unit
from measurements.services.registry import DEFAULT_UNITS, map_unit_string_to_code

logger = logging.getLogger(__name__)


def seed_units():
    """
    Seed (or refresh) global units from the registry.

    Returns:
        dict: A mapping of unit codes to Unit instances.
    """
    unit_map = {}

    for definition in DEFAULT_UNITS:
        unit, created = Unit.objects.update_or_create(
            code=definition.code,
            defaults={
                "name": definition.name,
                "category": definition.group,
                "factor_to_base": definition.factor_to_base,
            }
        )
        if created:
            logger.info(f"Seeded unit {unit.code}")
        unit_map[unit.code] = unit

    return unit_map
