"""
Numeric helpers shared by every analytics report.

All intermediate values are ``Decimal``; conversion to ``float`` happens
only in ``round_currency``/``round_percent``, i.e. when a value is put
into an output row.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[Decimal, int]

ZERO = Decimal('0')
HUNDRED = Decimal('100')
MONTHS_PER_YEAR = 12

_CENT = Decimal('0.01')
_TENTH = Decimal('0.1')


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps float inputs such as 19.99 from turning into 19.989999...
    return Decimal(str(value))


def divide(numerator: Number, denominator: Number, fallback: Number = ZERO) -> Decimal:
    """
    Division that returns ``fallback`` when ``denominator <= 0``.
    """
    if denominator <= 0:
        return to_decimal(fallback)
    return to_decimal(numerator) / to_decimal(denominator)


def percentage(part: Number, whole: Number) -> Decimal:
    return divide(part, whole) * HUNDRED


def round_currency(value: Number) -> float:
    """Round half-up to 2 decimal places."""
    return float(to_decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))


def round_percent(value: Number) -> float:
    """Round half-up to 1 decimal place."""
    return float(to_decimal(value).quantize(_TENTH, rounding=ROUND_HALF_UP))
