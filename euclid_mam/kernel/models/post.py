"""
Post and post metadata models.
"""

from enum import Enum
from typing import Any, Optional

from sqlalchemy import JSON, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from euclid_mam.kernel.models.base import Base, TimestampMixin


class PostType(str, Enum):
    """Content types known to the host."""
    POST = "post"
    PAGE = "page"
    REVISION = "revision"


class PostStatus(str, Enum):
    """Post publication status."""
    DRAFT = "draft"
    PUBLISH = "publish"
    INHERIT = "inherit"  # revisions and autosaves


class Post(Base, TimestampMixin):
    """A post, page or revision snapshot."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    author_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        index=True,
        nullable=False,
    )
    post_type: Mapped[str] = mapped_column(
        String(20),
        default=PostType.POST.value,
        index=True,
        nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(20),
        default=PostStatus.DRAFT.value,
        nullable=False,
    )
    title: Mapped[str] = mapped_column(Text, default="", nullable=False)
    # Revisions use "{parent}-revision-v1", autosaves "{parent}-autosave-v1"
    slug: Mapped[str] = mapped_column(String(200), default="", index=True, nullable=False)
    body: Mapped[str] = mapped_column(Text, default="", nullable=False)
    parent_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("posts.id", ondelete="CASCADE"),
        index=True,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Post {self.id} {self.post_type}>"


class PostMeta(Base):
    """Auxiliary key/value metadata attached to a post."""

    __tablename__ = "post_meta"
    __table_args__ = (
        UniqueConstraint("post_id", "meta_key", name="uq_post_meta_key"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        ForeignKey("posts.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    meta_key: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    meta_value: Mapped[Any] = mapped_column(JSON, nullable=True)
