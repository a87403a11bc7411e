"""
Content Core - posts, metadata and author presentation.
"""

from euclid_mam.kernel.content.content_service import ContentService, autosave_slug, revision_slug
from euclid_mam.kernel.content.author_service import AuthorName, AuthorService

__all__ = [
    "ContentService",
    "autosave_slug",
    "revision_slug",
    "AuthorName",
    "AuthorService",
]
