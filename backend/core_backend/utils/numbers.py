"""
Numeric input helpers.

Form values reach the services as strings, floats, Decimals or None. These
helpers normalise them to Decimal and reject anything that is not a finite
number.
"""
from decimal import Decimal, InvalidOperation
from typing import Optional


def to_decimal(value) -> Optional[Decimal]:
    """
    Convert ``value`` to a finite Decimal, or return None.

    Floats go through ``str`` so 0.1 stays 0.1. Booleans are not numbers here.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        number = value
    else:
        try:
            number = Decimal(str(value).strip())
        except (InvalidOperation, ValueError, TypeError):
            return None

    if not number.is_finite():
        return None
    return number


def to_positive_decimal(value) -> Optional[Decimal]:
    """Like ``to_decimal`` but also returns None for zero and negatives."""
    number = to_decimal(value)
    if number is None or number <= 0:
        return None
    return number
