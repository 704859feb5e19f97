"""
settings_document.py — The stored per-event settings document.

Events keep their invitation as one JSON document: the configuration keys
(``eventType``, ``enabledBlocks``, ``colorScheme``, ``customStyles``) plus a
sibling ``blockContent`` mapping of block kind to payload.
"""

import logging
from typing import Any, Dict, Mapping

from pydantic import Field

from invitations.dsl.schema import BlockKind, CamelModel, InvitationConfig, coerce_kind
from invitations.engine.reconcile import reconcile

logger = logging.getLogger(__name__)

CONTENT_KEYS = ("blockContent", "block_content")


class EventSettings(CamelModel):
    """A reconciled configuration together with its block content."""

    config: InvitationConfig
    block_content: Dict[BlockKind, Any] = Field(default_factory=dict)

    def content_for_render(self) -> Dict[str, Any]:
        """Block content keyed by kind string."""
        return {kind.value: payload for kind, payload in self.block_content.items()}


def load_settings(raw: Any, category: Any) -> EventSettings:
    """
    Parse a stored settings document.

    The configuration goes through ``reconcile``; block content is kept for
    known kinds whose payload is an object, anything else is dropped.

    Args:
        raw: Stored document (any shape, possibly None)
        category: Event category used for defaults

    Returns:
        EventSettings
    """
    config = reconcile(raw, category)
    content: Dict[BlockKind, Any] = {}

    raw_content = None
    if isinstance(raw, Mapping):
        raw_content = next((raw[key] for key in CONTENT_KEYS if key in raw), None)

    if isinstance(raw_content, Mapping):
        for key, payload in raw_content.items():
            kind = coerce_kind(key)
            if kind is None:
                logger.warning("Dropping content for unknown block %r", key)
                continue
            if not isinstance(payload, Mapping):
                logger.warning("Dropping %s content: expected an object, got %s", kind.value, type(payload).__name__)
                continue
            content[kind] = dict(payload)
    elif raw_content is not None:
        logger.warning("Stored blockContent is not an object; ignoring it")

    return EventSettings(config=config, block_content=content)


def dump_settings(settings: EventSettings) -> Dict[str, Any]:
    """Serialise settings to the stored JSON document shape."""
    document = settings.config.to_document()
    document["blockContent"] = settings.content_for_render()
    return document


def update_block_content(settings: EventSettings, kind: Any, payload: Mapping[str, Any]) -> EventSettings:
    """Replace one block's content. Unknown kinds are a no-op."""
    block_kind = coerce_kind(kind)
    if block_kind is None:
        return settings

    content = dict(settings.block_content)
    content[block_kind] = dict(payload)
    return settings.model_copy(update={"block_content": content})
