from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Admin:
    """Domain entity: an organization account that owns members.

    Note: plain data object, no DB access here.
    """

    admin_id: int
    username: str
    email: str
    password_hash: str
    company_name: str
