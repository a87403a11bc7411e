"""
The part of the host platform the contributor plugin relies on.
"""

from typing import Any, List, Optional, Protocol

from euclid_mam.kernel.content import AuthorName
from euclid_mam.kernel.models.user import User


class ContributorHost(Protocol):
    """
    Host operations consumed by the contributor editor and renderer.

    Name, avatar and URL lookups must degrade gracefully for unknown user
    ids (empty name, default avatar) instead of raising.
    """

    def get_current_user(self) -> Optional[User]: ...

    async def list_users(self) -> List[User]: ...

    async def list_users_with_capability(self, capability: str) -> List[User]: ...

    def user_can(self, user: Optional[User], capability: str) -> bool: ...

    async def get_post_author(self, post_id: int) -> Optional[int]: ...

    async def get_post_meta(self, post_id: int, key: str) -> Optional[Any]: ...

    async def update_post_meta(self, post_id: int, key: str, value: Any) -> None: ...

    async def delete_post_meta(self, post_id: int, key: str) -> bool: ...

    async def is_post_autosave(self, post_id: int) -> Optional[int]: ...

    async def is_post_revision(self, post_id: int) -> Optional[int]: ...

    async def author_posts_url(self, user_id: int) -> str: ...

    async def avatar_markup(self, user_id: int) -> str: ...

    async def author_display(self, user_id: int) -> AuthorName: ...

    def create_nonce(self, action: str) -> str: ...

    def verify_nonce(self, nonce: Optional[str], action: str) -> bool: ...
