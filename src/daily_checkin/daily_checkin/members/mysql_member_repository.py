from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..core.exceptions import StorageFaultError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Member
from .repository import MemberRepository

_COLUMNS = "member_id, owner_id, name, code"


def _row_to_member(row: dict) -> Member:
    return Member(
        member_id=int(row["member_id"]),
        name=row["name"],
        code=row["code"],
        owner_id=int(row["owner_id"]),
    )


def _raise_conflict(e: mysql.connector.IntegrityError):
    if is_duplicate_key(e):
        raise ValidationError("Member name or code already exists") from e
    raise StorageFaultError("member write violated a constraint") from e


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_code(self, code: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE code=%s", (code,))
            row = fetchone(cur)
            return _row_to_member(row) if row else None

    def list_by_owner(self, owner_id: int) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM members WHERE owner_id=%s ORDER BY name ASC",
                (int(owner_id),),
            )
            return [_row_to_member(r) for r in fetchall(cur)]

    def get_for_owner(self, *, owner_id: int, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM members WHERE owner_id=%s AND member_id=%s",
                (int(owner_id), int(member_id)),
            )
            row = fetchone(cur)
            return _row_to_member(row) if row else None

    def find_by_owner_and_name(self, *, owner_id: int, name: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM members WHERE owner_id=%s AND name=%s",
                (int(owner_id), name),
            )
            row = fetchone(cur)
            return _row_to_member(row) if row else None

    def create_member(self, *, owner_id: int, name: str, code: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO members(owner_id, name, code) VALUES(%s,%s,%s)",
                    (int(owner_id), name, code),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            _raise_conflict(e)

    def update_member(self, *, owner_id: int, member_id: int, name: str, code: str) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    UPDATE members
                    SET name=%s, code=%s
                    WHERE owner_id=%s AND member_id=%s
                    """,
                    (name, code, int(owner_id), int(member_id)),
                )
                return cur.rowcount > 0
        except mysql.connector.IntegrityError as e:
            _raise_conflict(e)

    def delete_with_attendance(self, *, owner_id: int, member_id: int) -> Optional[int]:
        # Both deletes share one transaction; db_cursor rolls back on any failure.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT name FROM members WHERE owner_id=%s AND member_id=%s FOR UPDATE",
                (int(owner_id), int(member_id)),
            )
            row = fetchone(cur)
            if not row:
                return None

            cur.execute(
                "DELETE FROM attendance_events WHERE owner_id=%s AND member_name=%s",
                (int(owner_id), row["name"]),
            )
            removed = int(cur.rowcount)
            cur.execute(
                "DELETE FROM members WHERE owner_id=%s AND member_id=%s",
                (int(owner_id), int(member_id)),
            )
            return removed
