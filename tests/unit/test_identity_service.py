"""Tests for user registration and login."""

import pytest

from euclid_mam.kernel.identity import IdentityService, sanitize_nicename
from euclid_mam.kernel.models import UserRole

from factories import TEST_PASSWORD


class TestIdentityService:
    """Tests for IdentityService."""

    @pytest.mark.asyncio
    async def test_register_user(self, db_session):
        identity = IdentityService(db_session)

        user = await identity.register_user(
            "Jane.Doe", "Jane@Example.com", "SecurePass123",
            roles=[UserRole.AUTHOR, "subscriber"],
            first_name="Jane", last_name="Doe",
        )

        assert user.id is not None
        assert user.email == "jane@example.com"
        assert user.nicename == "jane-doe"
        assert user.roles == ["author", "subscriber"]
        assert user.primary_role == "author"

    @pytest.mark.asyncio
    async def test_duplicate_login_rejected(self, db_session, editor_user):
        with pytest.raises(ValueError):
            await IdentityService(db_session).register_user("eddie", "new@example.com", "SecurePass123")

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, db_session, editor_user):
        with pytest.raises(ValueError):
            await IdentityService(db_session).register_user("newbie", "eddie@example.com", "SecurePass123")

    @pytest.mark.asyncio
    async def test_authenticate_by_login_or_email(self, db_session, editor_user):
        identity = IdentityService(db_session)

        by_login = await identity.authenticate("eddie", TEST_PASSWORD)
        by_email = await identity.authenticate("eddie@example.com", TEST_PASSWORD)

        assert by_login is not None and by_login[0].id == editor_user.id
        assert by_email is not None and by_email[1].access_token

    @pytest.mark.asyncio
    async def test_authenticate_failures(self, db_session, editor_user):
        identity = IdentityService(db_session)

        assert await identity.authenticate("eddie", "wrong") is None
        assert await identity.authenticate("nobody", TEST_PASSWORD) is None

        editor_user.is_active = False
        assert await identity.authenticate("eddie", TEST_PASSWORD) is None

    @pytest.mark.asyncio
    async def test_list_users_by_login(self, db_session, team):
        users = await IdentityService(db_session).list_users()

        assert [u.login for u in users] == ["ada", "alice", "carl", "eddie", "sam"]


def test_sanitize_nicename():
    assert sanitize_nicename("Mary Jane!") == "mary-jane"
