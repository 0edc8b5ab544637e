from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Protocol

from ..core.constants import DATE_FORMAT
from ..core.exceptions import ValidationError

# Calendar day bounds are millisecond precise, matching DATETIME(3) columns.
DAY_START = time(0, 0, 0, 0)
DAY_END = time(23, 59, 59, 999000)


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Server local time; the only authoritative clock in production."""

    def now(self) -> datetime:
        return datetime.now()


@dataclass
class FixedClock:
    """Clock pinned to one instant. Tests move it with `set`."""

    instant: datetime

    def now(self) -> datetime:
        return self.instant

    def set(self, instant: datetime) -> None:
        self.instant = instant


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except (AttributeError, ValueError):
        raise ValidationError("Date must be formatted as YYYY-MM-DD")


def parse_clock_time(value: str | time) -> time:
    """Accept `time` objects or HH:MM[:SS] strings from settings."""
    if isinstance(value, time):
        return value
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Invalid clock time: {value!r}")


def day_bounds(day: date) -> tuple[datetime, datetime]:
    return datetime.combine(day, DAY_START), datetime.combine(day, DAY_END)


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """First instant of the month and last millisecond of its final day."""
    last_day = calendar.monthrange(year, month)[1]
    start, _ = day_bounds(date(year, month, 1))
    _, end = day_bounds(date(year, month, last_day))
    return start, end


def parse_year_month(year, month) -> tuple[int, int]:
    if year is None or month is None or str(year).strip() == "" or str(month).strip() == "":
        raise ValidationError("Year and month are required")
    try:
        y = int(str(year).strip())
        m = int(str(month).strip())
    except ValueError:
        raise ValidationError("Year and month must be numbers")
    if not 1000 <= y <= 9999:
        raise ValidationError("Year must have 4 digits")
    if not 1 <= m <= 12:
        raise ValidationError("Month must be between 1 and 12")
    return y, m


def format_date(day: date) -> str:
    return day.strftime(DATE_FORMAT)
