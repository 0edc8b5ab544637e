from __future__ import annotations

from typing import Optional, Protocol

from .model import Admin


class AdminRepository(Protocol):
    """Repository interface for Admin.

    Services depend on this interface, never on a concrete DB.
    """

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Admin]:
        raise NotImplementedError

    def exists_with_username_or_email(self, *, username: str, email: str) -> bool:
        raise NotImplementedError

    def create_admin(self, *, username: str, email: str, password_hash: str, company_name: str) -> int:
        raise NotImplementedError
