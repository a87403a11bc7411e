"""
Kernel Data Models

SQLAlchemy models for the host platform: users, posts and per-post metadata.
"""

from euclid_mam.kernel.models.base import Base, TimestampMixin
from euclid_mam.kernel.models.user import User, UserRole
from euclid_mam.kernel.models.post import Post, PostMeta, PostStatus, PostType

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # User
    "User",
    "UserRole",
    # Content
    "Post",
    "PostMeta",
    "PostStatus",
    "PostType",
]
