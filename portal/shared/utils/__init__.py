"""Shared utilities: datetime and rounding."""

from portal.shared.utils.datetime import (
    ensure_utc,
    month_key,
    subtract_months,
    utc_now,
)
from portal.shared.utils.rounding import percentage, round_half_up, round_int

__all__ = [
    "utc_now",
    "ensure_utc",
    "subtract_months",
    "month_key",
    "percentage",
    "round_half_up",
    "round_int",
]
