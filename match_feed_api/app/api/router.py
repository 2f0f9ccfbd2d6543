"""
Top‑level routers.

``router`` gathers the REST domains and is mounted under ``/api`` by the
application factory.  The realtime feed lives outside that prefix.
"""

from fastapi import APIRouter

from .endpoints import matches, realtime, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(matches.router, prefix="/matches", tags=["matches"])

realtime_router = realtime.router
