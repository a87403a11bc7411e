"""
Public post pages. Bodies are passed through the_content filters; styles
come from wp_enqueue_scripts handlers.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from markupsafe import Markup

from euclid_mam.api.deps import Plugins, SiteHost
from euclid_mam.api.templating import templates
from euclid_mam.kernel.hooks import ExtensionPoint, HookRegistry
from euclid_mam.kernel.models.post import Post, PostStatus, PostType
from euclid_mam.kernel.platform import QueryContext, RequestContext

router = APIRouter()

PUBLIC_TYPES = (PostType.POST.value, PostType.PAGE.value)


async def render_body(hooks: HookRegistry, ctx: RequestContext, post: Post) -> Markup:
    return Markup(await hooks.apply_filters(ExtensionPoint.THE_CONTENT, post.body, ctx, post))


@router.get("/posts", response_class=HTMLResponse, name="list_posts")
async def list_posts(request: Request, host: SiteHost, plugins: Plugins):
    """Listing of published posts; not a singular view."""
    hooks = plugins.site_hooks
    ctx = RequestContext(host=host, query=QueryContext(is_singular=False))
    await hooks.do_action(ExtensionPoint.ENQUEUE_SCRIPTS, ctx)

    entries = []
    for post in await host.content.list_posts():
        entries.append({"post": post, "body": await render_body(hooks, ctx, post)})

    return templates.TemplateResponse(
        request,
        "site/list.html",
        {"entries": entries, "styles": ctx.styles.render()},
    )


@router.get("/posts/{post_id}", response_class=HTMLResponse, name="view_post")
async def view_post(request: Request, post_id: int, host: SiteHost, plugins: Plugins):
    """Single post or page."""
    post: Optional[Post] = await host.content.get_post(post_id)
    if (
        post is None
        or post.post_type not in PUBLIC_TYPES
        or post.status != PostStatus.PUBLISH.value
    ):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )

    hooks = plugins.site_hooks
    ctx = RequestContext(
        host=host,
        query=QueryContext(is_singular=True, post_type=post.post_type),
    )
    await hooks.do_action(ExtensionPoint.ENQUEUE_SCRIPTS, ctx)

    return templates.TemplateResponse(
        request,
        "site/single.html",
        {
            "post": post,
            "body": await render_body(hooks, ctx, post),
            "styles": ctx.styles.render(),
        },
    )
