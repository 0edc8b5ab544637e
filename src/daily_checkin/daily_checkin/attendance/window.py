from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time

from ..common.datetime_utils import parse_clock_time
from ..core.constants import DEFAULT_WINDOW_END, DEFAULT_WINDOW_START, WEEKEND_DAYS
from ..core.enums import WindowRejection
from ..core.exceptions import WindowClosedError


@dataclass(frozen=True)
class CheckinWindow:
    """Weekday-only, inclusive [start, end] local-time window for check-ins."""

    start: time = DEFAULT_WINDOW_START
    end: time = DEFAULT_WINDOW_END
    closed_weekdays: frozenset = WEEKEND_DAYS

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError("Check-in window start must not be after its end")

    @classmethod
    def from_settings(cls, start: str | time | None = None, end: str | time | None = None) -> "CheckinWindow":
        return cls(
            start=parse_clock_time(start) if start else DEFAULT_WINDOW_START,
            end=parse_clock_time(end) if end else DEFAULT_WINDOW_END,
        )

    def describe(self) -> str:
        return f"{self.start.strftime('%H:%M')} and {self.end.strftime('%H:%M')}"

    def rejection(self, now: datetime) -> WindowRejection | None:
        """Reason `now` is outside the window, or None when it is open.

        Weekday and time of day are both read from the same instant.
        """

        if now.weekday() in self.closed_weekdays:
            return WindowRejection.WEEKEND
        if not self.start <= now.time() <= self.end:
            return WindowRejection.OUTSIDE_HOURS
        return None

    def ensure_open(self, now: datetime) -> None:
        reason = self.rejection(now)
        if reason is WindowRejection.WEEKEND:
            raise WindowClosedError("Attendance not allowed on weekends", reason=reason)
        if reason is WindowRejection.OUTSIDE_HOURS:
            raise WindowClosedError(f"Check-in allowed between {self.describe()}", reason=reason)
