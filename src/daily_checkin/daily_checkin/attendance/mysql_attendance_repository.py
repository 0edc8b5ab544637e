from __future__ import annotations

from datetime import datetime
from typing import Sequence

import mysql.connector

from ..common.logging import get_logger
from ..core.exceptions import AlreadyMarkedError, StorageFaultError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key, normalize_mysql_datetime
from .model import AttendanceEvent
from .repository import AttendanceRepository

logger = get_logger(__name__)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists_between(self, *, owner_id: int, member_name: str, start: datetime, end: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT 1 AS found
                FROM attendance_events
                WHERE owner_id=%s AND member_name=%s AND checkin_time BETWEEN %s AND %s
                LIMIT 1
                """,
                (int(owner_id), member_name, start, end),
            )
            return fetchone(cur) is not None

    def append_event(self, *, owner_id: int, member_name: str, timestamp: datetime) -> int:
        # uq_attendance_member_day (owner_id, member_name, checkin_date) is the race guard.
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_events(owner_id, member_name, checkin_time, checkin_date)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(owner_id), member_name, timestamp, timestamp.date()),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                logger.info("Concurrent duplicate check-in rejected for %s (owner=%s)", member_name, owner_id)
                raise AlreadyMarkedError("Already checked in today") from e
            raise StorageFaultError("attendance insert violated a constraint") from e

    def list_for_owner_between(self, *, owner_id: int, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, owner_id, member_name, checkin_time
                FROM attendance_events
                WHERE owner_id=%s AND checkin_time BETWEEN %s AND %s
                ORDER BY checkin_time ASC, event_id ASC
                """,
                (int(owner_id), start, end),
            )
            return [
                AttendanceEvent(
                    event_id=int(r["event_id"]),
                    member_name=r["member_name"],
                    owner_id=int(r["owner_id"]),
                    timestamp=normalize_mysql_datetime(r["checkin_time"]),
                )
                for r in fetchall(cur)
            ]

