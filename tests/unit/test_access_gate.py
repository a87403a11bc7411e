"""Unit tests for who gets the contributors panel."""

import pytest

from euclid_mam.kernel.hooks import MetaBoxRegistry
from euclid_mam.kernel.models import User, UserRole
from euclid_mam.plugins.multi_author.access_gate import (
    PANEL_ID,
    PANEL_TITLE,
    can_manage_contributors,
    register_editor_panel,
)


def make_user(roles) -> User:
    return User(
        id=1,
        login="someone",
        email="someone@example.com",
        password_hash="x",
        nicename="someone",
        roles=list(roles),
        capabilities=[],
        is_active=True,
    )


async def render(ctx, post):
    return "panel"


class TestAccessGate:
    """Tests for can_manage_contributors and register_editor_panel."""

    @pytest.mark.parametrize(
        "role,allowed",
        [
            (UserRole.ADMINISTRATOR.value, True),
            (UserRole.EDITOR.value, True),
            (UserRole.AUTHOR.value, True),
            (UserRole.CONTRIBUTOR.value, False),
            (UserRole.SUBSCRIBER.value, False),
        ],
    )
    def test_primary_role(self, role, allowed):
        assert can_manage_contributors(make_user([role])) is allowed

    def test_only_first_role_counts(self):
        assert can_manage_contributors(make_user(["subscriber", "editor"])) is False
        assert can_manage_contributors(make_user(["author", "subscriber"])) is True

    def test_no_roles_or_no_user(self):
        assert can_manage_contributors(make_user([])) is False
        assert can_manage_contributors(None) is False

    def test_panel_registered_on_post_screen(self):
        boxes = MetaBoxRegistry()

        assert register_editor_panel(make_user(["editor"]), boxes, render) is True

        [box] = boxes.for_screen("post")
        assert box.id == PANEL_ID
        assert box.title == PANEL_TITLE
        assert box.context == "normal"
        assert box.render is render
        assert boxes.for_screen("page") == []

    def test_panel_withheld(self):
        boxes = MetaBoxRegistry()

        assert register_editor_panel(make_user(["contributor"]), boxes, render) is False
        assert register_editor_panel(None, boxes, render) is False
        assert len(boxes) == 0
