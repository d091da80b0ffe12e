"""Tests for clock adapters."""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from backend.clock import FixedClock, SystemClock
from shared.models import YearMonth


def test_fixed_clock_returns_injected_instant() -> None:
    instant = datetime(2025, 1, 31, 23, 0, tzinfo=timezone.utc)
    clock = FixedClock(instant)

    assert clock.now() == instant
    assert clock.current_month() == YearMonth.of(2025, 1)


def test_fixed_clock_rejects_naive_instant() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        FixedClock(datetime(2025, 1, 31))


def test_system_clock_returns_aware_now_in_configured_zone() -> None:
    zone = ZoneInfo("Europe/Zurich")
    clock = SystemClock(zone)

    before = clock.now()
    month = clock.current_month()
    after = clock.now()

    assert before.tzinfo is zone
    assert month in {YearMonth.from_datetime(before), YearMonth.from_datetime(after)}
