"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from app.api.histogram import router as histogram_router

router = APIRouter()
router.include_router(histogram_router)
