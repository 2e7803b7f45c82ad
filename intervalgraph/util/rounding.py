# intervalgraph/util/rounding.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from numbers import Rational
from typing import Union

Number = Union[int, float, Rational, Decimal]


def _to_decimal(x: Number) -> Decimal:
    if isinstance(x, float):
        return Decimal(repr(x))
    if isinstance(x, Rational):
        # ints and fractions.Fraction alike
        return Decimal(x.numerator) / Decimal(x.denominator)
    return Decimal(x)


def round_half_away(x: Number, precision: int = 2) -> Number:
    """Round half away from zero.

    Works on the shortest decimal repr of floats, so 0.125 -> 0.13 and
    -2.5 -> -3. Exact rationals (Fraction) are rounded from their true value.
    precision=0 returns an int.
    """
    q = Decimal(1).scaleb(-int(precision))
    r = _to_decimal(x).quantize(q, rounding=ROUND_HALF_UP)
    if precision <= 0:
        return int(r)
    return float(r)


def format_number(x: Number) -> str:
    """Shortest display form: 20.0 -> "20", 66.67 -> "66.67"."""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)
