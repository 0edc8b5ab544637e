from __future__ import annotations

import threading
from datetime import datetime
from typing import Optional

import pytest

from daily_checkin.admins.model import Admin
from daily_checkin.attendance.model import AttendanceEvent
from daily_checkin.common.datetime_utils import FixedClock
from daily_checkin.container import wire_services
from daily_checkin.core.exceptions import AlreadyMarkedError
from daily_checkin.members.model import Member

# Wednesday 2026-02-04 07:15, inside the morning window.
WEEKDAY_IN_WINDOW = datetime(2026, 2, 4, 7, 15, 0)


class InMemoryAdmins:
    def __init__(self):
        self._by_id: dict[int, Admin] = {}
        self._id = 0

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        return self._by_id.get(admin_id)

    def get_by_username(self, username: str) -> Optional[Admin]:
        return next((a for a in self._by_id.values() if a.username == username), None)

    def exists_with_username_or_email(self, *, username: str, email: str) -> bool:
        return any(a.username == username or a.email == email for a in self._by_id.values())

    def create_admin(self, *, username: str, email: str, password_hash: str, company_name: str) -> int:
        self._id += 1
        self._by_id[self._id] = Admin(
            admin_id=self._id,
            username=username,
            email=email,
            password_hash=password_hash,
            company_name=company_name,
        )
        return self._id


class InMemoryMembers:
    def __init__(self, attendance: "InMemoryAttendance"):
        self._by_id: dict[int, Member] = {}
        self._id = 0
        self._attendance = attendance

    def add(self, *, owner_id: int, name: str, code: str) -> Member:
        member_id = self.create_member(owner_id=owner_id, name=name, code=code)
        return self._by_id[member_id]

    def find_by_code(self, code: str) -> Optional[Member]:
        return next((m for m in self._by_id.values() if m.code == code), None)

    def list_by_owner(self, owner_id: int):
        return sorted((m for m in self._by_id.values() if m.owner_id == owner_id), key=lambda m: m.name)

    def get_for_owner(self, *, owner_id: int, member_id: int) -> Optional[Member]:
        m = self._by_id.get(member_id)
        return m if m and m.owner_id == owner_id else None

    def find_by_owner_and_name(self, *, owner_id: int, name: str) -> Optional[Member]:
        return next((m for m in self._by_id.values() if m.owner_id == owner_id and m.name == name), None)

    def create_member(self, *, owner_id: int, name: str, code: str) -> int:
        self._id += 1
        self._by_id[self._id] = Member(member_id=self._id, name=name, code=code, owner_id=owner_id)
        return self._id

    def update_member(self, *, owner_id: int, member_id: int, name: str, code: str) -> bool:
        if not self.get_for_owner(owner_id=owner_id, member_id=member_id):
            return False
        self._by_id[member_id] = Member(member_id=member_id, name=name, code=code, owner_id=owner_id)
        return True

    def delete_with_attendance(self, *, owner_id: int, member_id: int) -> Optional[int]:
        member = self.get_for_owner(owner_id=owner_id, member_id=member_id)
        if not member:
            return None
        removed = self._attendance.remove_member_events(owner_id=owner_id, member_name=member.name)
        del self._by_id[member_id]
        return removed


class InMemoryAttendance:
    """Attendance store whose append enforces the (owner, name, day) key atomically."""

    def __init__(self):
        self._events: list[AttendanceEvent] = []
        self._id = 0
        self._lock = threading.Lock()

    @property
    def events(self) -> list[AttendanceEvent]:
        return list(self._events)

    def seed(self, *, owner_id: int, member_name: str, timestamp: datetime) -> None:
        """Insert history directly, bypassing the per-day key (for report fixtures)."""
        with self._lock:
            self._id += 1
            self._events.append(AttendanceEvent(self._id, member_name, owner_id, timestamp))

    def exists_between(self, *, owner_id: int, member_name: str, start: datetime, end: datetime) -> bool:
        return any(
            e.owner_id == owner_id and e.member_name == member_name and start <= e.timestamp <= end
            for e in self._events
        )

    def append_event(self, *, owner_id: int, member_name: str, timestamp: datetime) -> int:
        with self._lock:
            for e in self._events:
                if e.owner_id == owner_id and e.member_name == member_name and e.checkin_date == timestamp.date():
                    raise AlreadyMarkedError("Already checked in today")
            self._id += 1
            self._events.append(AttendanceEvent(self._id, member_name, owner_id, timestamp))
            return self._id

    def list_for_owner_between(self, *, owner_id: int, start: datetime, end: datetime):
        rows = [e for e in self._events if e.owner_id == owner_id and start <= e.timestamp <= end]
        return sorted(rows, key=lambda e: (e.timestamp, e.event_id))

    def remove_member_events(self, *, owner_id: int, member_name: str) -> int:
        with self._lock:
            keep = [e for e in self._events if not (e.owner_id == owner_id and e.member_name == member_name)]
            removed = len(self._events) - len(keep)
            self._events = keep
            return removed


@pytest.fixture
def fixed_now() -> datetime:
    return WEEKDAY_IN_WINDOW


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def admins_repo() -> InMemoryAdmins:
    return InMemoryAdmins()


@pytest.fixture
def members_repo(attendance_repo) -> InMemoryMembers:
    return InMemoryMembers(attendance_repo)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def container(admins_repo, members_repo, attendance_repo, clock):
    return wire_services(
        admins_repo=admins_repo,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        clock=clock,
    )
