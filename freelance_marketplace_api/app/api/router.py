"""
Top‑level API router.

This router aggregates the domain routers under a unified prefix
(``/api`` by default, see ``Settings.api_prefix``).  When a new domain
is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    auth,
    connections,
    gigs,
    notifications,
    orders,
    profiles,
    projects,
)

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
# Profile routes span two prefixes (``/profile`` and ``/freelancers``)
# and therefore declare their full paths themselves.
router.include_router(profiles.router, tags=["profiles"])
router.include_router(gigs.router, prefix="/gigs", tags=["gigs"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(connections.router, prefix="/connections", tags=["connections"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
