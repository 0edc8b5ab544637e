from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.logging import get_logger
from ..common.validators import optional_stripped, require_non_empty
from ..core.exceptions import NotFoundError, UnknownCodeError, ValidationError
from .model import Member
from .repository import MemberRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class CodeOwner:
    """Public answer to "whose code is this?" used by the kiosk before check-in."""

    name: str
    owner_id: int


class MemberService:
    """Use case: admins manage the members they own."""

    def __init__(self, members: MemberRepository):
        self._members = members

    def _ensure_code_free(self, code: str, *, member_id: Optional[int] = None) -> None:
        existing = self._members.find_by_code(code)
        if existing and existing.member_id != member_id:
            raise ValidationError("User code already exists")

    def _ensure_name_free(self, owner_id: int, name: str, *, member_id: Optional[int] = None) -> None:
        existing = self._members.find_by_owner_and_name(owner_id=owner_id, name=name)
        if existing and existing.member_id != member_id:
            raise ValidationError("A member with this name already exists")

    def create_member(self, *, owner_id: int, name: str, code: str) -> Member:
        if not name or not code:
            raise ValidationError("Name and user code are required")
        name = require_non_empty(name, "Name")
        code = require_non_empty(code, "User code")

        self._ensure_code_free(code)
        self._ensure_name_free(owner_id, name)

        member_id = self._members.create_member(owner_id=owner_id, name=name, code=code)
        return Member(member_id=member_id, name=name, code=code, owner_id=owner_id)

    def list_members(self, owner_id: int) -> Sequence[Member]:
        return self._members.list_by_owner(owner_id)

    def update_member(
        self,
        *,
        owner_id: int,
        member_id: int,
        name: Optional[str] = None,
        code: Optional[str] = None,
    ) -> Member:
        member = self._members.get_for_owner(owner_id=owner_id, member_id=member_id)
        if not member:
            raise NotFoundError("User not found")

        new_name = optional_stripped(name) or member.name
        new_code = optional_stripped(code) or member.code

        if new_code != member.code:
            self._ensure_code_free(new_code, member_id=member.member_id)
        if new_name != member.name:
            # History keeps the old name; monthly views will show its code as N/A.
            self._ensure_name_free(owner_id, new_name, member_id=member.member_id)

        self._members.update_member(owner_id=owner_id, member_id=member_id, name=new_name, code=new_code)
        return Member(member_id=member.member_id, name=new_name, code=new_code, owner_id=owner_id)

    def delete_member(self, *, owner_id: int, member_id: int) -> int:
        """Delete a member and every attendance event recorded under its name.

        Returns the number of attendance events removed.
        """

        removed = self._members.delete_with_attendance(owner_id=owner_id, member_id=member_id)
        if removed is None:
            raise NotFoundError("User not found")

        logger.info("Deleted member_id=%s (owner=%s) and %d attendance events", member_id, owner_id, removed)
        return removed

    def validate_code(self, code: Optional[str]) -> CodeOwner:
        if not isinstance(code, str) or not code.strip():
            raise ValidationError("User code is required")

        member = self._members.find_by_code(code.strip())
        if not member:
            raise UnknownCodeError("Invalid user code")
        return CodeOwner(name=member.name, owner_id=member.owner_id)
