"""
Content service: posts, revisions and per-post metadata.
"""

from typing import Any, List, Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from euclid_mam.kernel.models.post import Post, PostMeta, PostStatus, PostType
from euclid_mam.logging_config import get_logger

logger = get_logger(__name__)


def autosave_slug(parent_id: int) -> str:
    return f"{parent_id}-autosave-v1"


def revision_slug(parent_id: int) -> str:
    return f"{parent_id}-revision-v1"


class ContentService:
    """
    Service for post storage.

    Metadata values are JSON documents keyed by (post, key); there is at most
    one value per key. Writes are flushed, never committed; the request's
    session owner commits.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    # Posts

    async def get_post(self, post_id: int) -> Optional[Post]:
        return await self.session.get(Post, post_id)

    async def get_post_author(self, post_id: int) -> Optional[int]:
        result = await self.session.execute(
            select(Post.author_id).where(Post.id == post_id)
        )
        return result.scalar_one_or_none()

    async def list_posts(
        self,
        post_type: str = PostType.POST.value,
        status: Optional[str] = PostStatus.PUBLISH.value,
    ) -> List[Post]:
        """Posts of a type, newest first."""
        query = select(Post).where(Post.post_type == post_type)
        if status is not None:
            query = query.where(Post.status == status)
        result = await self.session.execute(query.order_by(Post.id.desc()))
        return list(result.scalars().all())

    async def create_post(
        self,
        author_id: int,
        title: str = "",
        body: str = "",
        post_type: str = PostType.POST.value,
        status: str = PostStatus.DRAFT.value,
        slug: str = "",
    ) -> Post:
        post = Post(
            author_id=author_id,
            title=title,
            body=body,
            post_type=post_type,
            status=status,
            slug=slug,
        )
        self.session.add(post)
        await self.session.flush()
        return post

    async def update_post(
        self,
        post: Post,
        title: Optional[str] = None,
        body: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Post:
        if title is not None:
            post.title = title
        if body is not None:
            post.body = body
        if status is not None:
            post.status = status
        await self.session.flush()
        return post

    async def store_autosave(self, post: Post, author_id: int, title: str, body: str) -> Post:
        """Create or overwrite the autosave revision of a post."""
        result = await self.session.execute(
            select(Post).where(
                and_(
                    Post.parent_id == post.id,
                    Post.post_type == PostType.REVISION.value,
                    Post.slug == autosave_slug(post.id),
                )
            )
        )
        autosave = result.scalar_one_or_none()
        if autosave is None:
            autosave = Post(
                author_id=author_id,
                post_type=PostType.REVISION.value,
                status=PostStatus.INHERIT.value,
                slug=autosave_slug(post.id),
                parent_id=post.id,
            )
            self.session.add(autosave)
        autosave.title = title
        autosave.body = body
        await self.session.flush()
        return autosave

    async def save_revision(self, post: Post) -> Post:
        """Snapshot the current title and body of a post as a revision."""
        revision = Post(
            author_id=post.author_id,
            post_type=PostType.REVISION.value,
            status=PostStatus.INHERIT.value,
            title=post.title,
            body=post.body,
            slug=revision_slug(post.id),
            parent_id=post.id,
        )
        self.session.add(revision)
        await self.session.flush()
        return revision

    async def is_revision(self, post_id: int) -> Optional[int]:
        """Parent post id if the post is a revision (autosaves included), else None."""
        post = await self.get_post(post_id)
        if post is None or post.post_type != PostType.REVISION.value:
            return None
        return post.parent_id

    async def is_autosave(self, post_id: int) -> Optional[int]:
        """Parent post id if the post is an autosave, else None."""
        post = await self.get_post(post_id)
        if post is None or post.post_type != PostType.REVISION.value or post.parent_id is None:
            return None
        if f"{post.parent_id}-autosave" not in post.slug:
            return None
        return post.parent_id

    # Metadata

    async def get_meta(self, post_id: int, key: str) -> Optional[Any]:
        """Stored value for a key, or None when absent."""
        result = await self.session.execute(
            select(PostMeta.meta_value).where(
                and_(PostMeta.post_id == post_id, PostMeta.meta_key == key)
            )
        )
        return result.scalar_one_or_none()

    async def update_meta(self, post_id: int, key: str, value: Any) -> None:
        """Create or overwrite the value for a key."""
        result = await self.session.execute(
            select(PostMeta).where(
                and_(PostMeta.post_id == post_id, PostMeta.meta_key == key)
            )
        )
        meta = result.scalar_one_or_none()
        if meta is None:
            self.session.add(PostMeta(post_id=post_id, meta_key=key, meta_value=value))
        else:
            meta.meta_value = value
        await self.session.flush()
        logger.debug("Post meta updated", extra={"post_id": post_id, "meta_key": key})

    async def delete_meta(self, post_id: int, key: str) -> bool:
        """Remove a key. Returns False when there was nothing to remove."""
        result = await self.session.execute(
            delete(PostMeta).where(
                and_(PostMeta.post_id == post_id, PostMeta.meta_key == key)
            )
        )
        await self.session.flush()
        deleted = (result.rowcount or 0) > 0
        if deleted:
            logger.debug("Post meta deleted", extra={"post_id": post_id, "meta_key": key})
        return deleted
