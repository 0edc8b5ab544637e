from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import AttendanceEvent


class AttendanceRepository(Protocol):
    """Append-only attendance store.

    `append_event` must be atomic with respect to the once-per-day rule: when an
    event for the same (owner_id, member_name) already exists on the timestamp's
    calendar day it raises `AlreadyMarkedError` and writes nothing.
    """

    def exists_between(self, *, owner_id: int, member_name: str, start: datetime, end: datetime) -> bool:
        raise NotImplementedError

    def append_event(self, *, owner_id: int, member_name: str, timestamp: datetime) -> int:
        raise NotImplementedError

    def list_for_owner_between(self, *, owner_id: int, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        """Events for the owner within [start, end], oldest first."""

        raise NotImplementedError
