from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import Clock, SystemClock, day_bounds, format_date, month_bounds, parse_year_month
from ..core.constants import MISSING_CODE
from ..members.repository import MemberRepository
from .model import CheckinRecord, MemberStatus


class AttendanceReportService:
    """Read-only views joining the member directory with attendance events.

    Every query is scoped to an owner id that the caller has already verified.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberRepository,
        *,
        clock: Optional[Clock] = None,
    ):
        self._attendance = attendance
        self._members = members
        self._clock = clock or SystemClock()

    def list_members_with_status(self, owner_id: int, day: Optional[date] = None) -> list[MemberStatus]:
        day = day or self._clock.now().date()
        start, end = day_bounds(day)

        latest: dict[str, datetime] = {}
        for ev in self._attendance.list_for_owner_between(owner_id=owner_id, start=start, end=end):
            current = latest.get(ev.member_name)
            if current is None or ev.timestamp > current:
                latest[ev.member_name] = ev.timestamp

        return [
            MemberStatus(name=m.name, code=m.code, last_checkin=latest.get(m.name))
            for m in self._members.list_by_owner(owner_id)
        ]

    def get_attendance_by_month(self, owner_id: int, year, month) -> dict[str, list[CheckinRecord]]:
        """Check-ins of one month grouped by local date (YYYY-MM-DD).

        Days without check-ins are left out. Events whose member no longer
        exists under that name report the code as "N/A".
        """

        y, m = parse_year_month(year, month)
        start, end = month_bounds(y, m)

        events = self._attendance.list_for_owner_between(owner_id=owner_id, start=start, end=end)
        code_by_name = {mb.name: mb.code for mb in self._members.list_by_owner(owner_id)}

        grouped: dict[str, list[CheckinRecord]] = {}
        for ev in sorted(events, key=lambda e: e.timestamp):
            grouped.setdefault(format_date(ev.timestamp.date()), []).append(
                CheckinRecord(
                    name=ev.member_name,
                    code=code_by_name.get(ev.member_name, MISSING_CODE),
                    checkin=ev.timestamp,
                )
            )
        return grouped
