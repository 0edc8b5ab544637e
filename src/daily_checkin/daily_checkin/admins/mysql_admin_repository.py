from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import StorageFaultError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .model import Admin
from .repository import AdminRepository


def _row_to_admin(row: dict) -> Admin:
    return Admin(
        admin_id=int(row["admin_id"]),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        company_name=row["company_name"],
    )


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT admin_id, username, email, password_hash, company_name
                FROM admins
                WHERE admin_id=%s
                """,
                (int(admin_id),),
            )
            row = fetchone(cur)
            return _row_to_admin(row) if row else None

    def get_by_username(self, username: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT admin_id, username, email, password_hash, company_name
                FROM admins
                WHERE username=%s
                """,
                (username,),
            )
            row = fetchone(cur)
            return _row_to_admin(row) if row else None

    def exists_with_username_or_email(self, *, username: str, email: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS found FROM admins WHERE username=%s OR email=%s LIMIT 1",
                (username, email),
            )
            return fetchone(cur) is not None

    def create_admin(self, *, username: str, email: str, password_hash: str, company_name: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO admins(username, email, password_hash, company_name)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (username, email, password_hash, company_name),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise ValidationError("Username or email already exists") from e
            raise StorageFaultError("admin insert violated a constraint") from e
