"""Tests for post storage, revisions and metadata."""

import pytest

from euclid_mam.kernel.content import ContentService, autosave_slug
from euclid_mam.kernel.models import PostStatus, PostType

from factories import create_post


class TestPostMeta:
    """Tests for metadata storage."""

    @pytest.mark.asyncio
    async def test_absent_key(self, db_session, post):
        assert await ContentService(db_session).get_meta(post.id, "contributors") is None

    @pytest.mark.asyncio
    async def test_update_overwrites(self, db_session, post):
        content = ContentService(db_session)

        await content.update_meta(post.id, "contributors", [1, 2])
        await content.update_meta(post.id, "contributors", [3])

        assert await content.get_meta(post.id, "contributors") == [3]

    @pytest.mark.asyncio
    async def test_keys_are_per_post(self, db_session, author_user, post):
        content = ContentService(db_session)
        other = await create_post(db_session, author_user, title="Other")

        await content.update_meta(post.id, "contributors", [1])

        assert await content.get_meta(other.id, "contributors") is None

    @pytest.mark.asyncio
    async def test_delete(self, db_session, post):
        content = ContentService(db_session)
        await content.update_meta(post.id, "contributors", [1])

        assert await content.delete_meta(post.id, "contributors") is True
        assert await content.delete_meta(post.id, "contributors") is False
        assert await content.get_meta(post.id, "contributors") is None


class TestRevisions:
    """Tests for revision and autosave detection."""

    @pytest.mark.asyncio
    async def test_plain_post(self, db_session, post):
        content = ContentService(db_session)

        assert await content.is_revision(post.id) is None
        assert await content.is_autosave(post.id) is None

    @pytest.mark.asyncio
    async def test_revision(self, db_session, post):
        content = ContentService(db_session)

        revision = await content.save_revision(post)

        assert revision.post_type == PostType.REVISION.value
        assert revision.status == PostStatus.INHERIT.value
        assert revision.title == post.title
        assert await content.is_revision(revision.id) == post.id
        assert await content.is_autosave(revision.id) is None

    @pytest.mark.asyncio
    async def test_autosave_is_also_a_revision(self, db_session, author_user, post):
        content = ContentService(db_session)

        autosave = await content.store_autosave(post, author_user.id, "Draft title", "Draft")

        assert autosave.slug == autosave_slug(post.id)
        assert await content.is_autosave(autosave.id) == post.id
        assert await content.is_revision(autosave.id) == post.id

    @pytest.mark.asyncio
    async def test_autosave_is_reused(self, db_session, author_user, post):
        content = ContentService(db_session)

        first = await content.store_autosave(post, author_user.id, "One", "1")
        second = await content.store_autosave(post, author_user.id, "Two", "2")

        assert first.id == second.id
        assert second.title == "Two"

    @pytest.mark.asyncio
    async def test_unknown_post(self, db_session):
        content = ContentService(db_session)

        assert await content.is_revision(404) is None
        assert await content.get_post_author(404) is None

    @pytest.mark.asyncio
    async def test_update_post_leaves_revisions_alone(self, db_session, post):
        content = ContentService(db_session)

        await content.update_post(post, title="New title")

        assert post.title == "New title"
        assert await content.list_posts(post_type=PostType.REVISION.value, status=None) == []


class TestListPosts:
    @pytest.mark.asyncio
    async def test_published_newest_first(self, db_session, author_user, post):
        content = ContentService(db_session)
        newer = await create_post(db_session, author_user, title="Newer")
        await create_post(db_session, author_user, title="Draft", status=PostStatus.DRAFT.value)

        assert [p.id for p in await content.list_posts()] == [newer.id, post.id]
