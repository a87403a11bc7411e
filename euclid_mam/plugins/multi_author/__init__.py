"""
Multi Author Metabox - contributor authors for posts.
"""

from euclid_mam.plugins.multi_author.access_gate import (
    MANAGER_ROLES,
    PANEL_ID,
    can_manage_contributors,
    register_editor_panel,
)
from euclid_mam.plugins.multi_author.editor import (
    EditorRow,
    build_editor_rows,
    render_editor,
    save_selection,
)
from euclid_mam.plugins.multi_author.plugin import MultiAuthorMetabox
from euclid_mam.plugins.multi_author.renderer import append_contributors
from euclid_mam.plugins.multi_author.schemas import (
    META_KEY,
    NONCE_ACTION,
    NONCE_FIELD,
    ContributorSubmission,
    SaveOutcome,
    parse_submission,
    read_contributors,
)

__all__ = [
    "MANAGER_ROLES",
    "PANEL_ID",
    "can_manage_contributors",
    "register_editor_panel",
    "EditorRow",
    "build_editor_rows",
    "render_editor",
    "save_selection",
    "MultiAuthorMetabox",
    "append_contributors",
    "META_KEY",
    "NONCE_ACTION",
    "NONCE_FIELD",
    "ContributorSubmission",
    "SaveOutcome",
    "parse_submission",
    "read_contributors",
]
