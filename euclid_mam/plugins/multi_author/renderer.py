"""
Contributor block appended to single post views.
"""

from dataclasses import dataclass
from typing import List

from markupsafe import Markup

from euclid_mam.kernel.models.post import PostType
from euclid_mam.kernel.platform import QueryContext
from euclid_mam.logging_config import get_logger
from euclid_mam.plugins.multi_author.host import ContributorHost
from euclid_mam.plugins.multi_author.schemas import META_KEY, read_contributors
from euclid_mam.plugins.multi_author.templating import templates

logger = get_logger(__name__)

HEADING = "Contributors: "


@dataclass(frozen=True)
class ContributorCard:
    url: str
    avatar: Markup
    name: str


async def build_cards(host: ContributorHost, contributor_ids: List[object]) -> List[ContributorCard]:
    """One card per stored id, in stored order, duplicates included."""
    cards = []
    for user_id in contributor_ids:
        name = await host.author_display(user_id)
        cards.append(ContributorCard(
            url=await host.author_posts_url(user_id),
            avatar=Markup(await host.avatar_markup(user_id)),
            name=name.display_name,
        ))
    return cards


async def append_contributors(
    host: ContributorHost,
    post_id: int,
    body: str,
    query: QueryContext,
) -> str:
    """Append the contributors block when a single post is being viewed."""
    if not query.is_singular_of(PostType.POST.value):
        return body

    contributor_ids = read_contributors(await host.get_post_meta(post_id, META_KEY), post_id)
    if not contributor_ids:
        return body

    cards = await build_cards(host, contributor_ids)
    block = templates.get_template("contributors.html").render(heading=HEADING, cards=cards)
    return body + block
