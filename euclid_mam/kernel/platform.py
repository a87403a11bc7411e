"""
Host platform facade handed to plugins.

`HostPlatform` binds the kernel services to one database session and one
current user. `RequestContext` carries everything a hook handler may need
about the request being served, so handlers never read ambient state.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from euclid_mam.config import Settings, get_settings
from euclid_mam.kernel.content import AuthorName, AuthorService, ContentService
from euclid_mam.kernel.hooks import MetaBoxRegistry, StyleQueue
from euclid_mam.kernel.identity import IdentityService, NonceManager
from euclid_mam.kernel.models.user import User
from euclid_mam.kernel.permissions import PermissionService


class HostPlatform:
    """Session-bound access to users, posts, metadata, authors and nonces."""

    def __init__(
        self,
        session: AsyncSession,
        current_user: Optional[User] = None,
        settings: Optional[Settings] = None,
        nonces: Optional[NonceManager] = None,
    ):
        self.session = session
        self.settings = settings or get_settings()
        self._current_user = current_user
        self.content = ContentService(session)
        self.authors = AuthorService(session, self.settings)
        self.identity = IdentityService(session)
        self.permissions = PermissionService()
        self.nonces = nonces or NonceManager()

    # Users

    def get_current_user(self) -> Optional[User]:
        return self._current_user

    async def list_users(self) -> List[User]:
        return await self.identity.list_users()

    async def list_users_with_capability(self, capability: str) -> List[User]:
        return self.permissions.filter_users(await self.list_users(), capability)

    def user_can(self, user: Optional[User], capability: str) -> bool:
        return self.permissions.user_can(user, capability)

    # Posts and metadata

    async def get_post_author(self, post_id: int) -> Optional[int]:
        return await self.content.get_post_author(post_id)

    async def get_post_meta(self, post_id: int, key: str) -> Optional[Any]:
        return await self.content.get_meta(post_id, key)

    async def update_post_meta(self, post_id: int, key: str, value: Any) -> None:
        await self.content.update_meta(post_id, key, value)

    async def delete_post_meta(self, post_id: int, key: str) -> bool:
        return await self.content.delete_meta(post_id, key)

    async def is_post_autosave(self, post_id: int) -> Optional[int]:
        return await self.content.is_autosave(post_id)

    async def is_post_revision(self, post_id: int) -> Optional[int]:
        return await self.content.is_revision(post_id)

    # Authors

    async def author_posts_url(self, user_id: int) -> str:
        return await self.authors.posts_url(user_id)

    async def avatar_markup(self, user_id: int) -> str:
        return await self.authors.avatar_markup(user_id)

    async def author_display(self, user_id: int) -> AuthorName:
        return await self.authors.display(user_id)

    # Nonces

    def create_nonce(self, action: str) -> str:
        user = self._current_user
        return self.nonces.create(action, user.id if user else None)

    def verify_nonce(self, nonce: Optional[str], action: str) -> bool:
        user = self._current_user
        return self.nonces.verify(nonce, action, user.id if user else None)


@dataclass
class QueryContext:
    """What kind of public page is being rendered."""

    is_singular: bool = False
    post_type: Optional[str] = None

    def is_singular_of(self, post_type: str) -> bool:
        return self.is_singular and self.post_type == post_type


@dataclass
class RequestContext:
    """Explicit request state passed to every hook handler."""

    host: HostPlatform
    is_admin: bool = False
    query: QueryContext = field(default_factory=QueryContext)
    meta_boxes: MetaBoxRegistry = field(default_factory=MetaBoxRegistry)
    styles: StyleQueue = field(default_factory=StyleQueue)

    @property
    def current_user(self) -> Optional[User]:
        return self.host.get_current_user()
