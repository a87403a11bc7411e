"""Unit tests for role-derived capabilities."""

import pytest

from euclid_mam.kernel.models import User, UserRole
from euclid_mam.kernel.permissions import Capability, PermissionService


def make_user(roles, capabilities=(), is_active=True) -> User:
    return User(
        login="someone",
        email="someone@example.com",
        password_hash="x",
        nicename="someone",
        roles=list(roles),
        capabilities=list(capabilities),
        is_active=is_active,
    )


class TestPermissionService:
    """Tests for PermissionService."""

    @pytest.mark.parametrize(
        "role,expected",
        [
            (UserRole.ADMINISTRATOR.value, True),
            (UserRole.EDITOR.value, True),
            (UserRole.AUTHOR.value, True),
            (UserRole.CONTRIBUTOR.value, True),
            (UserRole.SUBSCRIBER.value, False),
            ("shop_manager", False),
        ],
    )
    def test_edit_posts_by_role(self, role, expected):
        assert PermissionService().user_can(make_user([role]), Capability.EDIT_POSTS) is expected

    def test_roles_are_cumulative(self):
        permissions = PermissionService()
        editor = make_user([UserRole.EDITOR.value])
        author = make_user([UserRole.AUTHOR.value])

        assert permissions.user_can(editor, Capability.EDIT_OTHERS_POSTS)
        assert not permissions.user_can(author, Capability.EDIT_OTHERS_POSTS)
        assert permissions.capabilities_for(author) < permissions.capabilities_for(editor)

    def test_union_of_roles_and_grants(self):
        user = make_user(
            [UserRole.SUBSCRIBER.value, UserRole.CONTRIBUTOR.value],
            capabilities=["manage_options"],
        )
        permissions = PermissionService()

        assert permissions.user_can(user, Capability.EDIT_POSTS)
        assert permissions.user_can(user, Capability.MANAGE_OPTIONS)

    def test_inactive_and_missing_users_hold_nothing(self):
        permissions = PermissionService()

        assert permissions.user_can(None, Capability.READ) is False
        assert permissions.user_can(make_user([UserRole.ADMINISTRATOR.value], is_active=False), Capability.READ) is False

    def test_filter_users_keeps_order(self):
        users = [
            make_user([UserRole.SUBSCRIBER.value]),
            make_user([UserRole.EDITOR.value]),
            make_user([UserRole.CONTRIBUTOR.value]),
        ]

        kept = PermissionService().filter_users(users, Capability.EDIT_POSTS)

        assert kept == [users[1], users[2]]
