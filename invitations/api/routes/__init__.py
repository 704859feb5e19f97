"""API routes for the invitation engine."""

from fastapi import APIRouter

from invitations.api.routes.catalog import router as catalog_router
from invitations.api.routes.invitations import router as invitations_router
from invitations.api.routes.events import router as events_router

# Main API router
api_router = APIRouter()

api_router.include_router(catalog_router, tags=["Catalog"])
api_router.include_router(invitations_router, prefix="/invitations", tags=["Invitations"])
api_router.include_router(events_router, prefix="/events", tags=["Events"])

__all__ = ["api_router"]
