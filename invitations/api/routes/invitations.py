"""Stateless engine routes used by the editor preview."""

from typing import Any, Optional

from fastapi import APIRouter, Depends
from pydantic import Field

from invitations.api.config import Settings, get_settings
from invitations.dsl.schema import CamelModel, EventDetails, InvitationConfig, PresentedBlock, ResolvedBlock
from invitations.engine import present, reconcile, resolve

router = APIRouter()


class ReconcileRequest(CamelModel):
    """Stored settings to reconcile."""
    settings: Any = None
    category: Optional[str] = None


class ResolveRequest(CamelModel):
    """Configuration and block content to resolve."""
    config: Any = None
    content: dict[str, Any] = Field(default_factory=dict)
    category: Optional[str] = None


class PresentRequest(ResolveRequest):
    """Resolve request plus the event record used for fallback content."""
    event: Optional[EventDetails] = None


@router.post("/reconcile", response_model=InvitationConfig)
async def reconcile_settings(
    request: ReconcileRequest,
    settings: Settings = Depends(get_settings),
):
    """Repair stored settings into a valid configuration."""
    return reconcile(request.settings, request.category or settings.default_category)


@router.post("/resolve", response_model=list[ResolvedBlock])
async def resolve_blocks(
    request: ResolveRequest,
    settings: Settings = Depends(get_settings),
):
    """Ordered, enabled blocks with their content and colors."""
    config = reconcile(request.config, request.category or settings.default_category)
    return list(resolve(config, request.content))


@router.post("/present", response_model=list[PresentedBlock])
async def present_blocks(
    request: PresentRequest,
    settings: Settings = Depends(get_settings),
):
    """Resolved blocks with validated content, falling back to event details."""
    config = reconcile(request.config, request.category or settings.default_category)
    return present(resolve(config, request.content), request.event)
