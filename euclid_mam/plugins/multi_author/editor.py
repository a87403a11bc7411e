"""
Contributor editor: the checkbox panel on the post edit screen and the
save step that writes the selection back to post metadata.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from euclid_mam.kernel.models.user import User
from euclid_mam.kernel.permissions import Capability
from euclid_mam.logging_config import get_logger
from euclid_mam.plugins.multi_author.host import ContributorHost
from euclid_mam.plugins.multi_author.schemas import (
    FIELD_NAME,
    META_KEY,
    NONCE_ACTION,
    NONCE_FIELD,
    ContributorSubmission,
    SaveOutcome,
    read_contributors,
)
from euclid_mam.plugins.multi_author.templating import templates

logger = get_logger(__name__)


@dataclass(frozen=True)
class EditorRow:
    """One checkbox in the contributors panel."""

    user_id: int
    handle: str
    first_name: str = ""
    last_name: str = ""
    checked: bool = False
    locked: bool = False

    @property
    def has_name(self) -> bool:
        return bool(self.first_name or self.last_name)


def build_editor_rows(
    users: Iterable[User],
    stored: Sequence[object],
    author_id: Optional[int],
    host: ContributorHost,
) -> List[EditorRow]:
    """
    Rows for every user who can edit posts.

    The post author is always checked and cannot be unchecked; everyone else
    is checked only when stored.
    """
    rows = []
    for user in users:
        if not host.user_can(user, Capability.EDIT_POSTS):
            continue
        is_author = author_id is not None and user.id == author_id
        rows.append(EditorRow(
            user_id=user.id,
            handle=user.nicename,
            first_name=user.first_name,
            last_name=user.last_name,
            checked=is_author or user.id in stored,
            locked=is_author,
        ))
    return rows


async def render_editor(host: ContributorHost, post_id: int) -> str:
    """HTML for the contributors panel of one post."""
    nonce = host.create_nonce(NONCE_ACTION)
    stored = read_contributors(await host.get_post_meta(post_id, META_KEY), post_id)
    author_id = await host.get_post_author(post_id)
    users = await host.list_users()

    rows = build_editor_rows(users, stored, author_id, host)
    return templates.get_template("editor.html").render(
        rows=rows,
        nonce=nonce,
        nonce_field=NONCE_FIELD,
        field_name=FIELD_NAME,
    )


async def save_selection(
    host: ContributorHost,
    post_id: int,
    submission: ContributorSubmission,
    *,
    is_autosave: bool = False,
    is_revision: bool = False,
) -> SaveOutcome:
    """
    Store the submitted contributors for a post.

    Autosaves, revisions, bad nonces and malformed submissions leave the
    stored value untouched. An empty selection removes the entry.
    """
    log_extra = {"post_id": post_id}

    if is_autosave:
        logger.debug("Skipping contributors save for autosave", extra=log_extra)
        return SaveOutcome.AUTOSAVE
    if is_revision:
        logger.debug("Skipping contributors save for revision", extra=log_extra)
        return SaveOutcome.REVISION
    if not host.verify_nonce(submission.nonce, NONCE_ACTION):
        logger.warning(
            "Contributors save rejected: missing or invalid nonce",
            extra={**log_extra, "nonce_present": bool(submission.nonce)},
        )
        return SaveOutcome.INVALID_NONCE
    if submission.malformed:
        logger.warning("Contributors save rejected: malformed selection", extra=log_extra)
        return SaveOutcome.MALFORMED

    if submission.contributors:
        await host.update_post_meta(post_id, META_KEY, list(submission.contributors))
        logger.info(
            "Contributors saved",
            extra={**log_extra, "contributors": submission.contributors},
        )
        return SaveOutcome.SAVED

    await host.delete_post_meta(post_id, META_KEY)
    logger.info("Contributors cleared", extra=log_extra)
    return SaveOutcome.DELETED
