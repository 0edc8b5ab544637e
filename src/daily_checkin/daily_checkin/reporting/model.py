from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class MemberStatus:
    """Read-model: a member and its latest check-in on the requested day."""

    name: str
    code: str
    last_checkin: Optional[datetime]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "code": self.code,
            "last_checkin": self.last_checkin.isoformat(timespec="milliseconds") if self.last_checkin else None,
        }


@dataclass(frozen=True)
class CheckinRecord:
    name: str
    code: str
    checkin: datetime

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "code": self.code,
            "checkin": self.checkin.isoformat(timespec="milliseconds"),
        }
