from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """Member directory interface.

    The attendance core only calls `find_by_code` and `list_by_owner`; the
    mutating methods belong to the directory screens.
    """

    def find_by_code(self, code: str) -> Optional[Member]:
        raise NotImplementedError

    def list_by_owner(self, owner_id: int) -> Sequence[Member]:
        raise NotImplementedError

    def get_for_owner(self, *, owner_id: int, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def find_by_owner_and_name(self, *, owner_id: int, name: str) -> Optional[Member]:
        raise NotImplementedError

    def create_member(self, *, owner_id: int, name: str, code: str) -> int:
        raise NotImplementedError

    def update_member(self, *, owner_id: int, member_id: int, name: str, code: str) -> bool:
        raise NotImplementedError

    def delete_with_attendance(self, *, owner_id: int, member_id: int) -> Optional[int]:
        """Delete the member and every attendance event under its name, all or nothing.

        Returns the number of events removed, or None when the member does not exist.
        """

        raise NotImplementedError
