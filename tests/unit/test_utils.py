"""Tests for datetime and rounding helpers."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from portal.shared.utils import (
    ensure_utc,
    month_key,
    percentage,
    round_half_up,
    round_int,
    subtract_months,
)


class TestSubtractMonths:
    def test_simple(self) -> None:
        assert subtract_months(datetime(2026, 10, 19, tzinfo=UTC), 6) == datetime(2026, 4, 19, tzinfo=UTC)

    def test_crosses_year(self) -> None:
        assert subtract_months(datetime(2026, 3, 15, 12, 30, tzinfo=UTC), 6) == datetime(2025, 9, 15, 12, 30, tzinfo=UTC)

    def test_clamps_day_to_target_month(self) -> None:
        assert subtract_months(datetime(2026, 8, 31, tzinfo=UTC), 6) == datetime(2026, 2, 28, tzinfo=UTC)
        assert subtract_months(datetime(2024, 8, 31, tzinfo=UTC), 6) == datetime(2024, 2, 29, tzinfo=UTC)

    def test_zero_months(self) -> None:
        dt = datetime(2026, 1, 31, tzinfo=UTC)
        assert subtract_months(dt, 0) == dt


def test_ensure_utc() -> None:
    assert ensure_utc(None) is None
    assert ensure_utc(datetime(2026, 1, 1)) == datetime(2026, 1, 1, tzinfo=UTC)
    plus_two = datetime(2026, 1, 1, 2, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_utc(plus_two) == datetime(2026, 1, 1, tzinfo=UTC)


def test_month_key() -> None:
    assert month_key(datetime(2026, 2, 3, tzinfo=UTC)) == "2026-02"
    assert month_key(datetime(2026, 1, 1, 1, tzinfo=timezone(timedelta(hours=3)))) == "2025-12"


class TestRounding:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.5, 1), (1.5, 2), (2.5, 3), (12.5, 13), (66.666, 67), (0.49, 0)],
    )
    def test_round_int_halves_up(self, value: float, expected: int) -> None:
        assert round_int(value) == expected

    def test_round_half_up_two_places(self) -> None:
        assert round_half_up(33.333333, 2) == 33.33
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(1.005, 2) == 1.01

    def test_percentage_guards_zero(self) -> None:
        assert percentage(5, 0) == 0.0
        assert percentage(1, 4) == 25.0
