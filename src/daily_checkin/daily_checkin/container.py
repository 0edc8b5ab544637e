from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admins.mysql_admin_repository import MySQLAdminRepository
from .admins.repository import AdminRepository
from .admins.service import AdminAuthService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceMarkingService
from .attendance.window import CheckinWindow
from .common.datetime_utils import Clock, SystemClock
from .database.connection import DBConfig, DatabaseConnection
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .reporting.service import AttendanceReportService


@dataclass(frozen=True)
class Container:
    admins_repo: AdminRepository
    members_repo: MemberRepository
    attendance_repo: AttendanceRepository

    auth_service: AdminAuthService
    member_service: MemberService
    marking_service: AttendanceMarkingService
    report_service: AttendanceReportService


def wire_services(
    *,
    admins_repo: AdminRepository,
    members_repo: MemberRepository,
    attendance_repo: AttendanceRepository,
    clock: Optional[Clock] = None,
    window: Optional[CheckinWindow] = None,
) -> Container:
    """Build services on top of any repository implementations (MySQL or in-memory)."""

    clock = clock or SystemClock()
    return Container(
        admins_repo=admins_repo,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        auth_service=AdminAuthService(admins_repo),
        member_service=MemberService(members_repo),
        marking_service=AttendanceMarkingService(attendance_repo, members_repo, clock=clock, window=window),
        report_service=AttendanceReportService(attendance_repo, members_repo, clock=clock),
    )


def build_container(*, db_config: dict, window: Optional[CheckinWindow] = None) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return wire_services(
        admins_repo=MySQLAdminRepository(conn),
        members_repo=MySQLMemberRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        window=window,
    )
