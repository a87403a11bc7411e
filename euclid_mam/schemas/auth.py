"""
Authentication schemas.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class UserLogin(BaseModel):
    """Login request; `login` accepts a login name or an email."""

    login: str = Field(..., min_length=1, max_length=255)
    password: str


class UserResponse(BaseModel):
    """User profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    login: str
    email: str
    nicename: str
    first_name: str = ""
    last_name: str = ""
    display_name: str = ""
    roles: List[str] = []
    is_active: bool
    created_at: datetime


class TokenResponse(BaseModel):
    """Authentication token response."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse
