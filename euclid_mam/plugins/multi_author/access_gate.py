"""
Who may manage contributors, and registration of the editor panel.
"""

from typing import FrozenSet, Optional

from euclid_mam.kernel.hooks import MetaBox, MetaBoxRegistry
from euclid_mam.kernel.hooks.screen import PanelRenderer
from euclid_mam.kernel.models.post import PostType
from euclid_mam.kernel.models.user import User, UserRole
from euclid_mam.logging_config import get_logger

logger = get_logger(__name__)

PANEL_ID = "euclid-multi-author"
PANEL_TITLE = "Contributors"

MANAGER_ROLES: FrozenSet[str] = frozenset({
    UserRole.ADMINISTRATOR.value,
    UserRole.EDITOR.value,
    UserRole.AUTHOR.value,
})


def can_manage_contributors(user: Optional[User]) -> bool:
    """Only the first listed role counts."""
    if user is None:
        return False
    return user.primary_role in MANAGER_ROLES


def register_editor_panel(
    user: Optional[User],
    meta_boxes: MetaBoxRegistry,
    render: PanelRenderer,
) -> bool:
    """Add the contributors panel to post edit screens if the user may manage contributors."""
    if not can_manage_contributors(user):
        logger.debug(
            "Contributors panel withheld",
            extra={
                "user_id": user.id if user else None,
                "role": user.primary_role if user else None,
            },
        )
        return False

    meta_boxes.add(MetaBox(
        id=PANEL_ID,
        title=PANEL_TITLE,
        render=render,
        screen=PostType.POST.value,
        context="normal",
    ))
    return True
