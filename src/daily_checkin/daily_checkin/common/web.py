from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import ErrorKind
from ..core.exceptions import DomainError
from .logging import get_logger

logger = get_logger(__name__)

GENERIC_SERVER_ERROR = "Server error"


def json_error(e: DomainError):
    """Render a domain error; storage faults never leak their internal message."""

    message = GENERIC_SERVER_ERROR if e.kind == ErrorKind.STORAGE_FAULT else str(e)
    return jsonify({"success": False, "error": e.kind.value, "message": message}), e.http_status


def server_error():
    return jsonify({"success": False, "error": ErrorKind.STORAGE_FAULT.value, "message": GENERIC_SERVER_ERROR}), 500


def handle_errors(view):
    """Map DomainError to its JSON response and anything else to a logged 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            if e.http_status >= 500:
                logger.error("%s failed: %s", view.__name__, e)
            return json_error(e)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return server_error()

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "admin_id" not in session:
            return (
                jsonify(
                    {
                        "success": False,
                        "error": ErrorKind.UNAUTHENTICATED.value,
                        "message": "No session, authorization denied",
                    }
                ),
                401,
            )
        return view(*args, **kwargs)

    return wrapper


def current_owner_id() -> int:
    return int(session["admin_id"])


def request_payload(request) -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
