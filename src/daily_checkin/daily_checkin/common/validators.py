from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def optional_stripped(value: Optional[str]) -> Optional[str]:
    """Blank strings count as "not supplied" for partial updates."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("Expected a string value")
    return value.strip() or None
