"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from crm.api.v1.dependencies (no manual repo/service construction).
Interaction, note and reminder routers carry their own paths since they are
reached both under /contacts/{contactId} and at the top level.
"""

from fastapi import APIRouter

from crm.api.v1.endpoints import (
    contacts,
    interactions,
    notes,
    reminders,
    search,
    stats,
    tags,
)

api_router = APIRouter()

api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
api_router.include_router(interactions.router, tags=["interactions"])
api_router.include_router(notes.router, tags=["notes"])
api_router.include_router(reminders.router, tags=["reminders"])
api_router.include_router(tags.router, prefix="/tags", tags=["tags"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
