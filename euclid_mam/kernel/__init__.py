"""
Host Kernel Layer

The small host platform that plugins run against:
- Identity Core (user accounts, roles, form nonces)
- Permission Core (role-derived capabilities)
- Content Core (posts, revisions, per-post metadata, author presentation)
- Hooks (extension points, editor panels, stylesheet queue)

Plugins reach the kernel only through HostPlatform and RequestContext
(euclid_mam.kernel.platform).
"""

from euclid_mam.kernel.models import (
    Post,
    PostMeta,
    PostStatus,
    PostType,
    User,
    UserRole,
)

__all__ = [
    "Post",
    "PostMeta",
    "PostStatus",
    "PostType",
    "User",
    "UserRole",
]
