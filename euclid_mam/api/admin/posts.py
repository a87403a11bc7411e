"""
Post edit screen: renders the editor panels plugins register on
admin_init and fires save_post when the form is submitted.
"""

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from markupsafe import Markup

from euclid_mam.api.deps import AdminHost, Plugins
from euclid_mam.api.templating import templates
from euclid_mam.kernel.hooks import ExtensionPoint
from euclid_mam.kernel.models.post import Post, PostType
from euclid_mam.kernel.permissions import Capability
from euclid_mam.kernel.platform import HostPlatform, RequestContext
from euclid_mam.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()


async def get_editable_post(host: HostPlatform, post_id: int) -> Post:
    """Load a post the current user may edit, or raise 404/403."""
    post = await host.content.get_post(post_id)
    if post is None or post.post_type == PostType.REVISION.value:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )

    user = host.get_current_user()
    if post.author_id != user.id and not host.user_can(user, Capability.EDIT_OTHERS_POSTS):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not allowed to edit this post",
        )
    return post


@router.get("/posts/{post_id}/edit", response_class=HTMLResponse, name="edit_post")
async def edit_post(request: Request, post_id: int, host: AdminHost, plugins: Plugins):
    """Edit screen with every panel registered for the post's type."""
    post = await get_editable_post(host, post_id)

    ctx = RequestContext(host=host, is_admin=True)
    await plugins.admin_hooks.do_action(ExtensionPoint.ADMIN_INIT, ctx)

    panels = []
    for box in ctx.meta_boxes.for_screen(post.post_type):
        panels.append({
            "id": box.id,
            "title": box.title,
            "context": box.context,
            "html": Markup(await box.render(ctx, post)),
        })

    return templates.TemplateResponse(
        request,
        "admin/edit_post.html",
        {"post": post, "panels": panels, "user": host.get_current_user()},
    )


@router.post("/posts/{post_id}", name="update_post")
async def update_post(request: Request, post_id: int, host: AdminHost, plugins: Plugins):
    """
    Save the edit form.

    The previous content is kept as a revision; save_post fires for the
    revision and then for the post itself, each with the submitted form.
    """
    post = await get_editable_post(host, post_id)
    form = await request.form()
    ctx = RequestContext(host=host, is_admin=True)

    revision = await host.content.save_revision(post)
    await plugins.admin_hooks.do_action(ExtensionPoint.SAVE_POST, ctx, revision.id, form)

    await host.content.update_post(
        post,
        title=form.get("post_title"),
        body=form.get("content"),
        status=form.get("post_status"),
    )
    await plugins.admin_hooks.do_action(ExtensionPoint.SAVE_POST, ctx, post.id, form)

    logger.info("Post updated", extra={"post_id": post.id, "user_id": host.get_current_user().id})
    return RedirectResponse(
        url=request.url_for("edit_post", post_id=post.id),
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.post("/posts/{post_id}/autosave", name="autosave_post")
async def autosave_post(request: Request, post_id: int, host: AdminHost, plugins: Plugins):
    """Store the in-progress edit as the post's autosave and fire save_post for it."""
    post = await get_editable_post(host, post_id)
    form = await request.form()
    ctx = RequestContext(host=host, is_admin=True)

    autosave = await host.content.store_autosave(
        post,
        author_id=host.get_current_user().id,
        title=form.get("post_title") or post.title,
        body=form.get("content") or post.body,
    )
    await plugins.admin_hooks.do_action(ExtensionPoint.SAVE_POST, ctx, autosave.id, form)

    return JSONResponse({"post_id": post.id, "autosave_id": autosave.id})
