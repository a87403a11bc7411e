"""
Role and capability checks.

Each role grants a fixed set of capabilities; a user holds the union of the
capabilities of all their roles plus any per-user grants.
"""

from typing import Dict, FrozenSet, Iterable, List, Optional, Set

from euclid_mam.kernel.models.user import User, UserRole


class Capability:
    """Capability names checked by the host and plugins."""
    READ = "read"
    EDIT_POSTS = "edit_posts"
    DELETE_POSTS = "delete_posts"
    PUBLISH_POSTS = "publish_posts"
    EDIT_PUBLISHED_POSTS = "edit_published_posts"
    DELETE_PUBLISHED_POSTS = "delete_published_posts"
    UPLOAD_FILES = "upload_files"
    EDIT_OTHERS_POSTS = "edit_others_posts"
    DELETE_OTHERS_POSTS = "delete_others_posts"
    READ_PRIVATE_POSTS = "read_private_posts"
    EDIT_PAGES = "edit_pages"
    PUBLISH_PAGES = "publish_pages"
    MANAGE_CATEGORIES = "manage_categories"
    MODERATE_COMMENTS = "moderate_comments"
    MANAGE_OPTIONS = "manage_options"
    LIST_USERS = "list_users"
    EDIT_USERS = "edit_users"
    ACTIVATE_PLUGINS = "activate_plugins"


_SUBSCRIBER = frozenset({Capability.READ})
_CONTRIBUTOR = _SUBSCRIBER | {Capability.EDIT_POSTS, Capability.DELETE_POSTS}
_AUTHOR = _CONTRIBUTOR | {
    Capability.PUBLISH_POSTS,
    Capability.EDIT_PUBLISHED_POSTS,
    Capability.DELETE_PUBLISHED_POSTS,
    Capability.UPLOAD_FILES,
}
_EDITOR = _AUTHOR | {
    Capability.EDIT_OTHERS_POSTS,
    Capability.DELETE_OTHERS_POSTS,
    Capability.READ_PRIVATE_POSTS,
    Capability.EDIT_PAGES,
    Capability.PUBLISH_PAGES,
    Capability.MANAGE_CATEGORIES,
    Capability.MODERATE_COMMENTS,
}
_ADMINISTRATOR = _EDITOR | {
    Capability.MANAGE_OPTIONS,
    Capability.LIST_USERS,
    Capability.EDIT_USERS,
    Capability.ACTIVATE_PLUGINS,
}

ROLE_CAPABILITIES: Dict[str, FrozenSet[str]] = {
    UserRole.SUBSCRIBER.value: _SUBSCRIBER,
    UserRole.CONTRIBUTOR.value: _CONTRIBUTOR,
    UserRole.AUTHOR.value: _AUTHOR,
    UserRole.EDITOR.value: _EDITOR,
    UserRole.ADMINISTRATOR.value: _ADMINISTRATOR,
}


class PermissionService:
    """
    Service for checking role-derived capabilities.

    Unknown role names grant nothing.
    """

    def __init__(self, role_capabilities: Optional[Dict[str, FrozenSet[str]]] = None):
        self.role_capabilities = role_capabilities or ROLE_CAPABILITIES

    def capabilities_for(self, user: User) -> Set[str]:
        """All capabilities held by a user."""
        caps: Set[str] = set(user.capabilities or [])
        for role in user.roles or []:
            caps |= self.role_capabilities.get(role, frozenset())
        return caps

    def user_can(self, user: Optional[User], capability: str) -> bool:
        """Check whether a user holds a capability. Inactive users hold none."""
        if user is None or not user.is_active:
            return False
        return capability in self.capabilities_for(user)

    def filter_users(self, users: Iterable[User], capability: str) -> List[User]:
        """Keep only the users holding a capability, preserving order."""
        return [u for u in users if self.user_can(u, capability)]
