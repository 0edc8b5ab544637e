from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.logging import get_logger
from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import AdminRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class SessionAdmin:
    """What we store into Flask session after login.

    `admin_id` is the owner id every member and report query is scoped to.
    """

    admin_id: int
    username: str
    company_name: str


class AdminAuthService:
    """Use case: register an organization account and log it in."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def register(self, *, username: str, email: str, password: str, company_name: str) -> SessionAdmin:
        username = require_non_empty(username, "Username")
        email = require_non_empty(email, "Email")
        company_name = require_non_empty(company_name, "Company name")
        require_non_empty(password, "Password")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)

        if "@" not in email:
            raise ValidationError("Email is not valid")

        if self._admins.exists_with_username_or_email(username=username, email=email):
            raise ValidationError("Username or email already exists")

        admin_id = self._admins.create_admin(
            username=username,
            email=email,
            password_hash=generate_password_hash(password),
            company_name=company_name,
        )
        logger.info("Registered company %s (admin_id=%s)", company_name, admin_id)
        return SessionAdmin(admin_id=admin_id, username=username, company_name=company_name)

    def authenticate(self, username: str, password: str) -> SessionAdmin:
        if not username or not password:
            raise ValidationError("Username and password are required")

        admin = self._admins.get_by_username(username.strip())
        if not admin:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(admin.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        return SessionAdmin(admin_id=admin.admin_id, username=admin.username, company_name=admin.company_name)
