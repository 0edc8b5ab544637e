from __future__ import annotations

import pytest

from daily_checkin.admins.service import AdminAuthService
from daily_checkin.core.exceptions import AuthenticationError, ValidationError


@pytest.fixture
def auth(admins_repo):
    return AdminAuthService(admins_repo)


def test_register_hashes_password_and_returns_session(auth, admins_repo):
    s_admin = auth.register(username="acme", email="ops@acme.test", password="secret1", company_name="Acme")

    assert s_admin.company_name == "Acme"
    stored = admins_repo.get_by_id(s_admin.admin_id)
    assert stored.password_hash != "secret1"


def test_register_rejects_duplicates_and_missing_fields(auth):
    auth.register(username="acme", email="ops@acme.test", password="secret1", company_name="Acme")

    with pytest.raises(ValidationError):
        auth.register(username="acme", email="other@acme.test", password="secret1", company_name="Acme 2")
    with pytest.raises(ValidationError):
        auth.register(username="new", email="ops@acme.test", password="secret1", company_name="Acme 3")
    with pytest.raises(ValidationError):
        auth.register(username="x", email="x@x.test", password="secret1", company_name="")
    with pytest.raises(ValidationError):
        auth.register(username="y", email="y@y.test", password="123", company_name="Y")


def test_authenticate(auth):
    created = auth.register(username="acme", email="ops@acme.test", password="secret1", company_name="Acme")

    assert auth.authenticate("acme", "secret1").admin_id == created.admin_id
    with pytest.raises(AuthenticationError):
        auth.authenticate("acme", "wrong")
    with pytest.raises(AuthenticationError):
        auth.authenticate("ghost", "secret1")
