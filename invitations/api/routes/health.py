"""Health check routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from invitations.api.config import Settings, get_settings
from invitations.components.registry import registry

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    app: str
    version: str
    block_kinds: int


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        app=settings.app_name,
        version=settings.app_version,
        block_kinds=len(registry),
    )
