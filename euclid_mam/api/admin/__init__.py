"""
Admin screens (HTML).
"""

from fastapi import APIRouter

from euclid_mam.api.admin import posts

router = APIRouter()

router.include_router(posts.router, tags=["Admin"])
