"""
Custom exceptions for the COGS system.
"""
from core_backend.exceptions import DomainError


class COGSError(DomainError):
    """Cost calculation failed."""

    code = "cogs_error"


class UnknownUnit(COGSError):
    """Raised when a unit symbol is not in the unit registry."""

    code = "unknown_unit"

    def __init__(self, unit_string, message=None):
        self.unit_string = unit_string
        if message is None:
            message = f"Unknown unit '{unit_string}'"
        super().__init__(message)


class UnitMismatchWarning(UserWarning):
    """
    Advisory, never raised: purchase and usage units belong to different
    groups (e.g. mass vs volume), so the cost assumes a 1:1 density.
    """

    def __init__(self, purchase_unit, usage_unit, message=None):
        self.purchase_unit = purchase_unit
        self.usage_unit = usage_unit
        if message is None:
            message = (
                f"Converting {purchase_unit.code} ({purchase_unit.group}) to "
                f"{usage_unit.code} ({usage_unit.group}) mixes different physical "
                f"quantities; a 1:1 density is assumed."
            )
        self.message = message
        super().__init__(message)

    def __str__(self):
        return self.message
