"""Clock contract and adapters used by time-relative payment queries."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Protocol

from shared.models import YearMonth


class Clock(Protocol):
    def now(self) -> datetime:
        """Return the current timezone-aware instant."""

    def current_month(self) -> YearMonth:
        """Return the calendar month of the current instant."""


class SystemClock:
    """Wall-clock time in a fixed timezone."""

    def __init__(self, timezone: tzinfo) -> None:
        self._timezone = timezone

    def now(self) -> datetime:
        return datetime.now(self._timezone)

    def current_month(self) -> YearMonth:
        return YearMonth.from_datetime(self.now())


class FixedClock:
    """Clock frozen at one instant, for tests and reproducible reports."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise ValueError("FixedClock requires a timezone-aware instant")
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def current_month(self) -> YearMonth:
        return YearMonth.from_datetime(self._instant)
