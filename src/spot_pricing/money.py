"""Decimal money helpers shared by every pricing step.

Amounts are carried as ``Decimal`` between steps.  Floats are converted
through ``str`` so that a rate typed as ``0.029`` is exactly 0.029 and not
its nearest binary neighbour.
"""

from __future__ import annotations

import math
from decimal import ROUND_FLOOR, Decimal
from numbers import Real

Number = int | float | Decimal

_HALF = Decimal("0.5")


def is_finite_number(value: object) -> bool:
    """True for real, finite numbers (bools excluded)."""
    if isinstance(value, bool) or value is None:
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, Real):
        return math.isfinite(value)
    return False


def to_float(value: object) -> float | None:
    """Float from a real number or a numeric string; None for anything else.

    Non-finite results (``"nan"``, ``inf``) are returned as such.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal, str)):
        return None
    try:
        return float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(str(value))


def round_to_minor(amount: Number, minor_unit: int = 2) -> Decimal:
    """Round half up on the scaled value: ``floor(x * 10^n + 0.5) / 10^n``.

    Halves go toward +inf, so 0.125 -> 0.13 and -0.125 -> -0.12.
    """
    scaled = to_decimal(amount).scaleb(minor_unit) + _HALF
    return scaled.to_integral_value(rounding=ROUND_FLOOR).scaleb(-minor_unit)


def clamp(value: Decimal, low: Decimal, high: Decimal) -> Decimal:
    return min(high, max(low, value))


def as_amount(value: Decimal) -> float:
    """Export a rounded decimal as a float for result models."""
    return float(value)
