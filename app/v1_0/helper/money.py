from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable

CENT = Decimal("0.01")

def to_amount(value: Any) -> float:
    """None (or a missing amount) counts as 0."""
    return float(value or 0.0)

def round_currency(value: float) -> float:
    """
    Round to 2 decimals, half-up on the decimal representation.

    round() works on the binary float and would send 2.675 to 2.67.
    """
    return float(Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP))

def sum_amounts(values: Iterable[Any]) -> float:
    return sum((to_amount(v) for v in values), 0.0)
