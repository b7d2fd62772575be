"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import audit, blogs, entries

router = APIRouter()

router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
router.include_router(entries.router, prefix="/entries", tags=["entries"])
router.include_router(audit.router, prefix="/audit", tags=["audit"])
