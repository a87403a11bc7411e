"""
Identity service for user management operations.
"""

import re
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from euclid_mam.kernel.models.user import User, UserRole
from euclid_mam.kernel.identity.password import hash_password, verify_password
from euclid_mam.kernel.identity.jwt import JWTManager, TokenPair
from euclid_mam.logging_config import get_logger

logger = get_logger(__name__)


def sanitize_nicename(login: str) -> str:
    """Derive a URL-safe handle from a login name."""
    handle = re.sub(r"[^a-z0-9_-]+", "-", login.lower()).strip("-")
    return handle[:50]


class IdentityService:
    """
    Service for user identity operations.

    Handles user registration, authentication and lookups.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.jwt_manager = JWTManager()

    async def register_user(
        self,
        login: str,
        email: str,
        password: str,
        roles: Sequence[UserRole | str] = (UserRole.SUBSCRIBER,),
        first_name: str = "",
        last_name: str = "",
        display_name: Optional[str] = None,
        capabilities: Sequence[str] = (),
    ) -> User:
        """
        Register a new user.

        Args:
            login: Unique login name
            email: Unique email address
            password: Plain text password
            roles: Ordered roles; the first is the primary role
            first_name: Optional first name
            last_name: Optional last name
            display_name: Public name; defaults to the login
            capabilities: Extra per-user capability grants

        Returns:
            The created User object

        Raises:
            ValueError: If the login or email already exists
        """
        if await self.get_user_by_login(login):
            raise ValueError("Login already registered")
        if await self.get_user_by_email(email):
            raise ValueError("Email already registered")

        user = User(
            login=login.strip(),
            email=email.lower().strip(),
            password_hash=hash_password(password),
            nicename=sanitize_nicename(login),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            display_name=(display_name or login).strip(),
            roles=[r.value if isinstance(r, UserRole) else r for r in roles],
            capabilities=list(capabilities),
        )

        self.session.add(user)
        await self.session.flush()  # Get the ID

        logger.info("User registered", extra={"user_id": user.id, "roles": user.roles})
        return user

    async def authenticate(
        self,
        login: str,
        password: str,
    ) -> Optional[tuple[User, TokenPair]]:
        """
        Authenticate a user by login or email and return an access token.

        Returns:
            Tuple of (User, TokenPair) if successful, None otherwise
        """
        user = await self.get_user_by_login(login)
        if not user:
            user = await self.get_user_by_email(login)
        if not user or not user.is_active:
            return None

        if not verify_password(password, user.password_hash):
            logger.info("Failed login", extra={"login": login})
            return None

        token_pair = self.jwt_manager.create_token_pair(user.id, user.login)
        return user, token_pair

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        return await self.session.get(User, user_id)

    async def get_user_by_login(self, login: str) -> Optional[User]:
        """Get user by login name."""
        result = await self.session.execute(
            select(User).where(User.login == login.strip())
        )
        return result.scalar_one_or_none()

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        result = await self.session.execute(
            select(User).where(User.email == email.lower().strip())
        )
        return result.scalar_one_or_none()

    async def list_users(self) -> List[User]:
        """All users ordered by login, like the host's user listing."""
        result = await self.session.execute(select(User).order_by(User.login))
        return list(result.scalars().all())
