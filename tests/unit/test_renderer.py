"""Tests for the contributors block on single post views."""

import re

import pytest

from euclid_mam.kernel.platform import HostPlatform, QueryContext
from euclid_mam.plugins.multi_author.renderer import HEADING, append_contributors
from euclid_mam.plugins.multi_author.schemas import META_KEY

from factories import create_user

SINGLE_POST = QueryContext(is_singular=True, post_type="post")
BODY = "<p>Body text.</p>"


@pytest.fixture
def site_host(db_session) -> HostPlatform:
    """Anonymous visitor."""
    return HostPlatform(db_session)


def names(html: str) -> list:
    return re.findall(r'<span class="euclid-author-name">([^<]*)</span>', html)


class TestAppendContributors:
    """Tests for append_contributors."""

    @pytest.mark.asyncio
    async def test_block_appended_in_stored_order(self, site_host, team, post):
        await site_host.update_post_meta(post.id, META_KEY, [team["contributor"].id, team["admin"].id])

        html = await append_contributors(site_host, post.id, BODY, SINGLE_POST)

        assert html.startswith(BODY + '<div class="euclid-multi-author-metabox">')
        assert f"<h3>{HEADING}</h3>" in html
        assert names(html) == ["carl", "Ada Admin"]
        assert html.endswith("</div></div>")

    @pytest.mark.asyncio
    async def test_card_markup(self, site_host, team, post):
        await site_host.update_post_meta(post.id, META_KEY, [team["contributor"].id])

        html = await append_contributors(site_host, post.id, BODY, SINGLE_POST)

        assert '<a href="http://test/author/carl/"><div class="euclid-contributor">' in html
        assert '<div class="euclid-avatar"><img alt="" src="https://secure.gravatar.com/avatar/' in html
        assert 'class="avatar avatar-96 photo" height="96" width="96"' in html

    @pytest.mark.asyncio
    async def test_duplicates_shown_twice(self, site_host, team, post):
        await site_host.update_post_meta(post.id, META_KEY, [team["editor"].id, team["editor"].id])

        html = await append_contributors(site_host, post.id, BODY, SINGLE_POST)

        assert names(html) == ["Eddie Editor", "Eddie Editor"]

    @pytest.mark.asyncio
    async def test_unknown_user_degrades(self, site_host, team, post):
        await site_host.update_post_meta(post.id, META_KEY, [999])

        html = await append_contributors(site_host, post.id, BODY, SINGLE_POST)

        assert names(html) == [""]
        assert '<a href="http://test/?author=999">' in html

    @pytest.mark.asyncio
    @pytest.mark.parametrize("stored", [None, [], "3,4", 5])
    async def test_nothing_to_show(self, site_host, team, post, stored):
        if stored is not None:
            await site_host.update_post_meta(post.id, META_KEY, stored)

        assert await append_contributors(site_host, post.id, BODY, SINGLE_POST) == BODY

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "query",
        [
            QueryContext(),
            QueryContext(is_singular=False, post_type="post"),
            QueryContext(is_singular=True, post_type="page"),
        ],
    )
    async def test_only_single_post_views(self, site_host, team, post, query):
        await site_host.update_post_meta(post.id, META_KEY, [team["contributor"].id])

        assert await append_contributors(site_host, post.id, BODY, query) == BODY

    @pytest.mark.asyncio
    async def test_names_escaped(self, db_session, site_host, post):
        user = await create_user(db_session, "mallory", ["author"], "<b>Mal", "</b>")
        await site_host.update_post_meta(post.id, META_KEY, [user.id])

        html = await append_contributors(site_host, post.id, BODY, SINGLE_POST)

        assert "&lt;b&gt;Mal &lt;/b&gt;" in html
        assert "<b>" not in html
