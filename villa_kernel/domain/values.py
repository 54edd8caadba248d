"""
Rounding helpers.

Presentation rounding follows JavaScript ``Math.round`` semantics (half
toward positive infinity) so figures match the dashboards that have always
consumed them.  Arithmetic is exact ``Decimal``; floats never enter.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal
from fractions import Fraction

ZERO = Decimal("0")
_HALF = Decimal("0.5")
_CENT = Decimal("100")


def round_half_up(value: Decimal) -> Decimal:
    """Round to an integer, halves toward +infinity (``Math.round``)."""
    return (value + _HALF).to_integral_value(rounding=ROUND_FLOOR)


def round_cents(value: Decimal) -> Decimal:
    """``Math.round(value * 100) / 100`` with Decimal exactness."""
    return round_half_up(value * _CENT) / _CENT


def rounded_percentage(part: int, whole: int) -> int:
    """
    ``Math.round(part / whole * 100)``, or 0 when ``whole`` is 0.

    Computed on exact fractions, so x.5 percentages always round up.
    """
    if whole <= 0:
        return 0
    ratio = Fraction(part * 100, whole) + Fraction(1, 2)
    return ratio.numerator // ratio.denominator
