"""
User model for identity management.
"""

from enum import Enum
from typing import List, Optional

from sqlalchemy import JSON, Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from euclid_mam.kernel.models.base import Base, TimestampMixin


class UserRole(str, Enum):
    """User roles in the system, most to least privileged."""
    ADMINISTRATOR = "administrator"
    EDITOR = "editor"
    AUTHOR = "author"
    CONTRIBUTOR = "contributor"
    SUBSCRIBER = "subscriber"


class User(Base, TimestampMixin):
    """User account model."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    login: Mapped[str] = mapped_column(
        String(60),
        unique=True,
        index=True,
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    # URL-safe handle used in author archive links
    nicename: Mapped[str] = mapped_column(
        String(60),
        index=True,
        nullable=False,
    )
    first_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    display_name: Mapped[str] = mapped_column(String(250), default="", nullable=False)

    # Ordered; the first entry is the primary role
    roles: Mapped[List[str]] = mapped_column(
        JSON,
        default=lambda: [UserRole.SUBSCRIBER.value],
        nullable=False,
    )
    # Per-user grants on top of what the roles provide
    capabilities: Mapped[List[str]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )

    @property
    def primary_role(self) -> Optional[str]:
        return self.roles[0] if self.roles else None

    def __repr__(self) -> str:
        return f"<User {self.id} {self.login}>"
