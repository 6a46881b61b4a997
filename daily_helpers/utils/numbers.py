# ==============================================================================
# NUMBER HELPERS
# ==============================================================================

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[int, float, Decimal]


def _to_decimal(number: Optional[Number]) -> Decimal:
    if number is None:
        return Decimal(0)
    if isinstance(number, float):
        # repr keeps 2.675 as 2.675 instead of its binary expansion
        return Decimal(repr(number))
    return Decimal(number)


def format_number(number: Optional[Number], decimals: int = 2) -> str:
    """
    Format with comma thousands separators and a dot decimal separator.

    None is treated as 0. Midpoints round away from zero.

    Example:
        >>> format_number(1234567.891)
        '1,234,567.89'
    """
    exponent = Decimal(1).scaleb(-decimals)
    rounded = _to_decimal(number).quantize(exponent, rounding=ROUND_HALF_UP)
    return f"{rounded:,.{decimals}f}"


def round_to_nearest_integer(number: Optional[Number]) -> int:
    """Round to the nearest integer, midpoints away from zero; None gives 0."""
    return int(_to_decimal(number).quantize(Decimal(1), rounding=ROUND_HALF_UP))
