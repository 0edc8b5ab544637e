from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable error kinds returned to API callers."""

    INVALID_INPUT = "InvalidInput"
    WINDOW_CLOSED = "WindowClosed"
    UNKNOWN_CODE = "UnknownCode"
    ALREADY_MARKED = "AlreadyMarked"
    STORAGE_FAULT = "StorageFault"
    UNAUTHENTICATED = "Unauthenticated"
    NOT_FOUND = "NotFound"


class WindowRejection(str, Enum):
    """Why the check-in window refused an attempt."""

    WEEKEND = "weekend"
    OUTSIDE_HOURS = "outside hours"
