"""
Public site pages (HTML).
"""

from fastapi import APIRouter

from euclid_mam.api.site import posts

router = APIRouter()

router.include_router(posts.router, tags=["Site"])
