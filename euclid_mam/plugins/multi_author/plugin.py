"""
Multi Author Metabox plugin.

Lets administrators, editors and authors pick contributors for a post from
the edit screen, and shows those contributors (avatar, name, author link)
at the end of the post on single post views.
"""

from pathlib import Path
from typing import Any, Mapping, Optional

from euclid_mam.kernel.hooks import ExtensionPoint, HookRegistry
from euclid_mam.kernel.models.post import Post
from euclid_mam.kernel.platform import RequestContext
from euclid_mam.logging_config import get_logger
from euclid_mam.plugins.base import Plugin
from euclid_mam.plugins.multi_author.access_gate import register_editor_panel
from euclid_mam.plugins.multi_author.editor import render_editor, save_selection
from euclid_mam.plugins.multi_author.renderer import append_contributors
from euclid_mam.plugins.multi_author.schemas import SaveOutcome, parse_submission

logger = get_logger(__name__)

STYLE_HANDLE = "mam-style"
STYLE_PATH = "css/mam-style.css"


class MultiAuthorMetabox(Plugin):
    """Contributor selection on the edit screen and display on the post page."""

    @property
    def name(self) -> str:
        return "Multi Author Metabox"

    @property
    def slug(self) -> str:
        return "euclid-mam"

    @property
    def version(self) -> str:
        return "2.0"

    @property
    def assets_dir(self) -> Optional[Path]:
        return Path(__file__).parent / "assets"

    def register(self, hooks: HookRegistry, *, is_admin: bool) -> None:
        hooks.add_action(ExtensionPoint.ADMIN_INIT, self.check_user_role)
        hooks.add_action(ExtensionPoint.SAVE_POST, self.save_post)

        # Display and styling only on public pages
        if not is_admin:
            hooks.add_filter(ExtensionPoint.THE_CONTENT, self.display_contributors)
            hooks.add_action(ExtensionPoint.ENQUEUE_SCRIPTS, self.enqueue_css)

    async def enqueue_css(self, ctx: RequestContext) -> None:
        ctx.styles.enqueue(STYLE_HANDLE, self.asset_url(STYLE_PATH))

    async def check_user_role(self, ctx: RequestContext) -> None:
        """Offer the contributors panel to users whose primary role allows it."""
        register_editor_panel(ctx.current_user, ctx.meta_boxes, self.fill_metabox)

    async def fill_metabox(self, ctx: RequestContext, post: Post) -> str:
        return await render_editor(ctx.host, post.id)

    async def save_post(
        self,
        ctx: RequestContext,
        post_id: int,
        form: Mapping[str, Any],
    ) -> SaveOutcome:
        submission = parse_submission(form)
        return await save_selection(
            ctx.host,
            post_id,
            submission,
            is_autosave=bool(await ctx.host.is_post_autosave(post_id)),
            is_revision=bool(await ctx.host.is_post_revision(post_id)),
        )

    async def display_contributors(self, content: str, ctx: RequestContext, post: Post) -> str:
        return await append_contributors(ctx.host, post.id, content, ctx.query)
