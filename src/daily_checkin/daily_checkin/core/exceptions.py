from __future__ import annotations

from .enums import ErrorKind, WindowRejection


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT
    http_status: int = 400


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class WindowClosedError(DomainError):
    """Raised when a check-in is attempted outside the allowed window."""

    kind = ErrorKind.WINDOW_CLOSED

    def __init__(self, message: str, *, reason: WindowRejection):
        super().__init__(message)
        self.reason = reason


class UnknownCodeError(DomainError):
    """Raised when a presented code matches no member."""

    kind = ErrorKind.UNKNOWN_CODE


class AlreadyMarkedError(DomainError):
    """Raised when the member already checked in today."""

    kind = ErrorKind.ALREADY_MARKED


class StorageFaultError(DomainError):
    """Raised when the persistence layer fails.

    The message is meant for logs only; controllers never echo it.
    """

    kind = ErrorKind.STORAGE_FAULT
    http_status = 500


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    kind = ErrorKind.UNAUTHENTICATED
    http_status = 401


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND
    http_status = 404
