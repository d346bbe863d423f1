"""Half-up rounding and guarded ratios used by the analytics reports.

Python's round() uses banker's rounding (round(0.5) == 0); report
percentages must round halves up so 12.5% shows as 13%.
"""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round value to ndigits decimals, halves away from zero.

    Args:
        value: Number to round.
        ndigits: Decimal places to keep (0 for whole numbers).

    Returns:
        Rounded float.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: float) -> int:
    """Round value to the nearest integer, halves up."""
    return int(round_half_up(value, 0))


def percentage(part: float, whole: float) -> float:
    """Return part / whole * 100, or 0.0 when whole is not positive."""
    if whole <= 0:
        return 0.0
    return part / whole * 100
