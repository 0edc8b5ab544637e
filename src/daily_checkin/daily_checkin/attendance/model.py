from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one recorded check-in. Immutable once stored.

    Events are linked to members by name (frozen at write time) plus owner,
    not by member id, so a later rename leaves history under the old name.
    """

    event_id: int
    member_name: str
    owner_id: int
    timestamp: datetime

    @property
    def checkin_date(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class MarkResult:
    member_name: str
    timestamp: datetime
    message: str
