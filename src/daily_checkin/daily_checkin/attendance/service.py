from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import Clock, SystemClock, day_bounds
from ..common.logging import get_logger
from ..core.exceptions import AlreadyMarkedError, UnknownCodeError, ValidationError
from ..members.repository import MemberRepository
from .model import MarkResult
from .repository import AttendanceRepository
from .window import CheckinWindow

logger = get_logger(__name__)


class AttendanceMarkingService:
    """Use case: a member presents a code at the kiosk to check in.

    Gates run in a fixed order and the first failure wins; nothing is written
    unless every gate passes. The once-per-day read below is a fast path only,
    the repository's atomic append is what guarantees a single event per day.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberRepository,
        *,
        clock: Optional[Clock] = None,
        window: Optional[CheckinWindow] = None,
    ):
        self._attendance = attendance
        self._members = members
        self._clock = clock or SystemClock()
        self._window = window or CheckinWindow()

    def mark_attendance(self, code: Optional[str]) -> MarkResult:
        if not isinstance(code, str) or not code.strip():
            raise ValidationError("User code is required")
        code = code.strip()

        now = self._clock.now()
        self._window.ensure_open(now)

        member = self._members.find_by_code(code)
        if not member:
            raise UnknownCodeError("Invalid user code")

        start, end = day_bounds(now.date())
        if self._attendance.exists_between(owner_id=member.owner_id, member_name=member.name, start=start, end=end):
            raise AlreadyMarkedError("Already checked in today")

        self._attendance.append_event(owner_id=member.owner_id, member_name=member.name, timestamp=now)
        logger.info("Marked attendance for %s (owner=%s) at %s", member.name, member.owner_id, now.isoformat())

        return MarkResult(
            member_name=member.name,
            timestamp=now,
            message="Attendance marked successfully",
        )
