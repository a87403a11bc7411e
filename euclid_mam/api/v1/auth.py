"""
Authentication endpoints.
"""

from fastapi import APIRouter, HTTPException, status

from euclid_mam.api.deps import CurrentUser, DbSession
from euclid_mam.kernel.identity import IdentityService
from euclid_mam.schemas.auth import TokenResponse, UserLogin, UserResponse
from euclid_mam.schemas.common import ErrorResponse

router = APIRouter()


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(data: UserLogin, db: DbSession):
    """
    Authenticate by login name or email and return a bearer token.
    """
    result = await IdentityService(db).authenticate(
        login=data.login,
        password=data.password,
    )

    if not result:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid login or password",
        )

    user, token_pair = result

    return TokenResponse(
        access_token=token_pair.access_token,
        token_type=token_pair.token_type,
        expires_in=token_pair.expires_in,
        user=UserResponse.model_validate(user),
    )


@router.get(
    "/me",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}},
)
async def get_current_user_profile(user: CurrentUser):
    """Get current user's profile."""
    return UserResponse.model_validate(user)
