"""Per-event invitation routes: load, edit and render stored settings."""

import logging
from typing import Any, Mapping, Optional

from fastapi import APIRouter, HTTPException, status

from invitations.api.config import Settings
from invitations.api.dependencies import AppSettings, EventId, Store
from invitations.dsl.schema import CamelModel, InvitationConfig, ResolvedBlock, coerce_kind
from invitations.engine import (
    EventSettings,
    change_event_type,
    dump_settings,
    load_settings,
    reorder,
    resolve,
    toggle,
    update_block_content,
    update_color,
)
from invitations.engine.reconcile import EVENT_TYPE_KEYS
from invitations.store import SettingsStore

logger = logging.getLogger(__name__)

router = APIRouter()


class ToggleRequest(CamelModel):
    """Block to enable or disable."""
    kind: str


class ReorderRequest(CamelModel):
    """Drag-and-drop gesture: ``dragged`` was dropped onto ``target``."""
    dragged: str
    target: str


class EventTypeRequest(CamelModel):
    """New event category."""
    event_type: str


class ColorUpdateRequest(CamelModel):
    """Single color slot edit."""
    slot: str
    value: str


def _category_for(document: Any, category: Optional[str], settings: Settings) -> str:
    """Explicit category, else the document's own eventType, else the configured default."""
    if category:
        return category
    if isinstance(document, Mapping):
        for key in EVENT_TYPE_KEYS:
            event_type = document.get(key)
            if isinstance(event_type, str) and event_type.strip():
                return event_type
    return settings.default_category


def _load(
    store: SettingsStore,
    event_id: str,
    category: Optional[str],
    settings: Settings,
) -> EventSettings:
    stored = store.get(event_id)
    return load_settings(stored, _category_for(stored, category, settings))


def _save(store: SettingsStore, event_id: str, event_settings: EventSettings) -> dict[str, Any]:
    document = dump_settings(event_settings)
    store.put(event_id, document)
    return document


def _edit_config(event_settings: EventSettings, config: InvitationConfig) -> EventSettings:
    return event_settings.model_copy(update={"config": config})


@router.get("/{event_id}/invitation")
async def get_invitation(
    event_id: EventId,
    store: Store,
    settings: AppSettings,
    category: Optional[str] = None,
) -> dict[str, Any]:
    """Stored settings document, reconciled.

    The first read of an event stores its category defaults, so later edits
    keep the category.
    """
    event_settings = _load(store, event_id, category, settings)
    if store.get(event_id) is None:
        return _save(store, event_id, event_settings)
    return dump_settings(event_settings)


@router.put("/{event_id}/invitation")
async def put_invitation(
    document: dict[str, Any],
    event_id: EventId,
    store: Store,
    settings: AppSettings,
    category: Optional[str] = None,
) -> dict[str, Any]:
    """Reconcile a submitted settings document and store it."""
    event_settings = load_settings(document, _category_for(document, category, settings))
    logger.info("Saving invitation settings for event %s", event_id)
    return _save(store, event_id, event_settings)


@router.post("/{event_id}/invitation/toggle")
async def toggle_block(
    request: ToggleRequest,
    event_id: EventId,
    store: Store,
    settings: AppSettings,
    category: Optional[str] = None,
) -> dict[str, Any]:
    """Enable or disable a block. Unknown kinds leave the settings unchanged."""
    event_settings = _load(store, event_id, category, settings)
    config = toggle(event_settings.config, request.kind)
    return _save(store, event_id, _edit_config(event_settings, config))


@router.post("/{event_id}/invitation/reorder")
async def reorder_blocks(
    request: ReorderRequest,
    event_id: EventId,
    store: Store,
    settings: AppSettings,
    category: Optional[str] = None,
) -> dict[str, Any]:
    """Swap the positions of two blocks."""
    event_settings = _load(store, event_id, category, settings)
    config = reorder(event_settings.config, request.dragged, request.target)
    return _save(store, event_id, _edit_config(event_settings, config))


@router.post("/{event_id}/invitation/event-type")
async def set_event_type(
    request: EventTypeRequest,
    event_id: EventId,
    store: Store,
    settings: AppSettings,
) -> dict[str, Any]:
    """Change the event category, resetting the color scheme to its default."""
    event_settings = _load(store, event_id, request.event_type, settings)
    config = change_event_type(event_settings.config, request.event_type)
    return _save(store, event_id, _edit_config(event_settings, config))


@router.patch("/{event_id}/invitation/colors")
async def update_colors(
    request: ColorUpdateRequest,
    event_id: EventId,
    store: Store,
    settings: AppSettings,
    category: Optional[str] = None,
) -> dict[str, Any]:
    """Edit one color slot."""
    event_settings = _load(store, event_id, category, settings)
    try:
        config = update_color(event_settings.config, request.slot, request.value)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
    return _save(store, event_id, _edit_config(event_settings, config))


@router.put("/{event_id}/invitation/content/{kind}")
async def put_block_content(
    kind: str,
    payload: dict[str, Any],
    event_id: EventId,
    store: Store,
    settings: AppSettings,
    category: Optional[str] = None,
) -> dict[str, Any]:
    """Replace one block's content."""
    if coerce_kind(kind) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown block kind: {kind}",
        )
    event_settings = _load(store, event_id, category, settings)
    return _save(store, event_id, update_block_content(event_settings, kind, payload))


@router.get("/{event_id}/invitation/render", response_model=list[ResolvedBlock])
async def render_invitation(
    event_id: EventId,
    store: Store,
    settings: AppSettings,
    category: Optional[str] = None,
):
    """Ordered, enabled blocks for the public page and preview frames."""
    event_settings = _load(store, event_id, category, settings)
    return list(resolve(event_settings.config, event_settings.content_for_render()))
