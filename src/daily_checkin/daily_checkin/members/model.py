from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Member:
    """Domain entity: a person who checks in with a code.

    `code` is unique across all owners; `name` is unique within an owner.
    """

    member_id: int
    name: str
    code: str
    owner_id: int
