from __future__ import annotations

from datetime import date, datetime

import mysql.connector
import pytest
from mysql.connector import errorcode

from daily_checkin.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from daily_checkin.core.exceptions import AlreadyMarkedError, StorageFaultError


class FakeCursor:
    def __init__(self, *, error=None, rows=None):
        self._error = error
        self._rows = rows or []
        self.executed: list[tuple] = []
        self.lastrowid = 11
        self.rowcount = len(self._rows)

    def execute(self, sql, params=None):
        self.executed.append((sql, params))
        if self._error is not None:
            raise self._error

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor: FakeCursor):
        self.conn = FakeConnection(cursor)

    def connect(self):
        return self.conn


NOW = datetime(2026, 2, 4, 7, 15, 30, 250000)


def test_append_writes_timestamp_and_calendar_day():
    cur = FakeCursor()
    factory = FakeConnFactory(cur)

    event_id = MySQLAttendanceRepository(factory).append_event(owner_id=3, member_name="Alice", timestamp=NOW)

    assert event_id == 11
    _, params = cur.executed[0]
    assert params == (3, "Alice", NOW, date(2026, 2, 4))
    assert factory.conn.committed and factory.conn.closed


def test_duplicate_key_becomes_already_marked():
    dup = mysql.connector.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY)
    factory = FakeConnFactory(FakeCursor(error=dup))

    with pytest.raises(AlreadyMarkedError):
        MySQLAttendanceRepository(factory).append_event(owner_id=3, member_name="Alice", timestamp=NOW)
    assert factory.conn.rolled_back
    assert not factory.conn.committed


def test_other_driver_errors_become_storage_faults():
    err = mysql.connector.OperationalError(msg="Lost connection", errno=errorcode.CR_SERVER_LOST)
    factory = FakeConnFactory(FakeCursor(error=err))

    with pytest.raises(StorageFaultError):
        MySQLAttendanceRepository(factory).list_for_owner_between(owner_id=3, start=NOW, end=NOW)
    assert factory.conn.rolled_back and factory.conn.closed


def test_list_maps_rows_to_events():
    rows = [{"event_id": 5, "owner_id": 3, "member_name": "Alice", "checkin_time": "2026-02-04 07:15:30.250"}]
    factory = FakeConnFactory(FakeCursor(rows=rows))

    events = MySQLAttendanceRepository(factory).list_for_owner_between(owner_id=3, start=NOW, end=NOW)

    assert events[0].timestamp == NOW
    assert events[0].member_name == "Alice"
