"""
Pydantic schemas for API request/response validation.
"""

from euclid_mam.schemas.auth import UserLogin, UserResponse, TokenResponse
from euclid_mam.schemas.common import ErrorResponse, HealthResponse

__all__ = [
    "UserLogin",
    "UserResponse",
    "TokenResponse",
    "ErrorResponse",
    "HealthResponse",
]
