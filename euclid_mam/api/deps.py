"""
FastAPI dependencies for authentication, database sessions and the host
platform.
"""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from sqlalchemy.ext.asyncio import AsyncSession

from euclid_mam.database import get_db
from euclid_mam.kernel.identity import IdentityService, verify_access_token
from euclid_mam.kernel.models.user import User
from euclid_mam.kernel.permissions import Capability, PermissionService
from euclid_mam.kernel.platform import HostPlatform
from euclid_mam.plugins.manager import PluginManager


security = HTTPBearer(auto_error=False)

DbSession = Annotated[AsyncSession, Depends(get_db)]


async def _user_from_token(token: str, db: AsyncSession) -> Optional[User]:
    payload = verify_access_token(token)
    if not payload:
        return None
    try:
        user_id = int(payload.sub)
    except ValueError:
        return None
    return await IdentityService(db).get_user_by_id(user_id)


async def get_current_user_optional(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    db: DbSession,
) -> Optional[User]:
    """Get current user if authenticated, None otherwise."""
    if not credentials:
        return None

    user = await _user_from_token(credentials.credentials, db)
    if not user or not user.is_active:
        return None
    return user


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    db: DbSession,
) -> User:
    """Get current authenticated user or raise 401."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await _user_from_token(credentials.credentials, db)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is disabled",
        )

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
OptionalUser = Annotated[Optional[User], Depends(get_current_user_optional)]


async def require_editing_user(user: CurrentUser) -> User:
    """Admin screens are for users who can edit posts."""
    if not PermissionService().user_can(user, Capability.EDIT_POSTS):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Insufficient permissions. Required: {Capability.EDIT_POSTS}",
        )
    return user


EditingUser = Annotated[User, Depends(require_editing_user)]


def get_plugins(request: Request) -> PluginManager:
    return request.app.state.plugins


Plugins = Annotated[PluginManager, Depends(get_plugins)]


async def get_admin_host(user: EditingUser, db: DbSession) -> HostPlatform:
    return HostPlatform(db, current_user=user)


async def get_site_host(user: OptionalUser, db: DbSession) -> HostPlatform:
    return HostPlatform(db, current_user=user)


AdminHost = Annotated[HostPlatform, Depends(get_admin_host)]
SiteHost = Annotated[HostPlatform, Depends(get_site_host)]
