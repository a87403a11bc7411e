"""
Author presentation: names, avatars and archive links.

Lookups for unknown or deleted users never fail; they fall back to an empty
name, the default avatar and an id-based archive URL.
"""

import hashlib
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

from markupsafe import Markup
from sqlalchemy.ext.asyncio import AsyncSession

from euclid_mam.config import Settings, get_settings
from euclid_mam.kernel.models.user import User

GRAVATAR_BASE = "https://secure.gravatar.com/avatar/"
UNKNOWN_EMAIL = "unknown@gravatar.com"


@dataclass(frozen=True)
class AuthorName:
    """Name parts used to label an author."""

    first_name: str = ""
    last_name: str = ""
    handle: str = ""
    display_name: str = ""

    @property
    def has_name(self) -> bool:
        return bool(self.first_name or self.last_name)


class AuthorService:
    """Resolve how an author is shown on public pages."""

    def __init__(self, session: AsyncSession, settings: Optional[Settings] = None):
        self.session = session
        self.settings = settings or get_settings()

    async def _user(self, user_id: int) -> Optional[User]:
        return await self.session.get(User, user_id)

    async def display(self, user_id: int) -> AuthorName:
        user = await self._user(user_id)
        if user is None:
            return AuthorName()
        return AuthorName(
            first_name=user.first_name,
            last_name=user.last_name,
            handle=user.nicename,
            display_name=user.display_name,
        )

    async def posts_url(self, user_id: int) -> str:
        """Author archive link: pretty URL by handle, or ?author=ID."""
        site = self.settings.site_url.rstrip("/")
        user = await self._user(user_id)
        if user is None or not user.nicename:
            return f"{site}/?{urlencode({'author': user_id})}"
        return f"{site}/author/{user.nicename}/"

    def avatar_url(self, email: Optional[str], size: Optional[int] = None) -> str:
        size = size or self.settings.avatar_size
        source = (email or UNKNOWN_EMAIL).strip().lower()
        digest = hashlib.md5(source.encode("utf-8")).hexdigest()
        query = urlencode({
            "s": size,
            "d": self.settings.avatar_default,
            "r": self.settings.avatar_rating,
        })
        return f"{GRAVATAR_BASE}{digest}?{query}"

    async def avatar_markup(self, user_id: int, size: Optional[int] = None) -> Markup:
        """<img> tag for a user's avatar."""
        size = size or self.settings.avatar_size
        user = await self._user(user_id)
        url = self.avatar_url(user.email if user else None, size)
        retina = self.avatar_url(user.email if user else None, size * 2)
        return Markup(
            "<img alt=\"\" src=\"{url}\" srcset=\"{retina} 2x\" "
            "class=\"avatar avatar-{size} photo\" height=\"{size}\" width=\"{size}\" "
            "loading=\"lazy\" decoding=\"async\">"
        ).format(url=url, retina=retina, size=size)
