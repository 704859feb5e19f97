"""
presenters.py — Per-block presentation capabilities.

The engine passes block content through untouched. Each block kind has a
presenter that knows how to validate its payload and, for a few kinds, how
to derive default content from the event record when the owner has not
written any.

Policy for an enabled block with no content:
- hero, location and rsvp fall back to content derived from the event
  (title and description, venue address, default RSVP options)
- every other kind renders nothing
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from invitations.components.parameters import BlockPayload
from invitations.components.registry import get_definition, list_definitions
from invitations.dsl.schema import BlockKind, EventDetails, PresentedBlock, ResolvedBlock, coerce_kind

logger = logging.getLogger(__name__)

FallbackFn = Callable[[EventDetails], Optional[Dict[str, Any]]]


# =============================================================================
# FALLBACK CONTENT
# =============================================================================

DEFAULT_MAX_GUESTS = 5


def hero_fallback(event: EventDetails) -> Optional[Dict[str, Any]]:
    """Event title and description with a countdown."""
    if not event.title:
        return None
    return {
        "title": event.title,
        "subtitle": event.description,
        "showCountdown": True,
    }


def location_fallback(event: EventDetails) -> Optional[Dict[str, Any]]:
    """The event venue, when the event record has one."""
    if not event.location:
        return None
    return {"address": event.location}


def rsvp_fallback(event: EventDetails) -> Optional[Dict[str, Any]]:
    """Plus-ones allowed, up to five guests per invite."""
    return {"allowPlusOnes": True, "maxGuestsPerInvite": DEFAULT_MAX_GUESTS}


# =============================================================================
# PRESENTERS
# =============================================================================

@dataclass(frozen=True)
class BlockPresenter:
    """Validation and fallback capability for one block kind."""
    kind: BlockKind
    payload_schema: type
    fallback: Optional[FallbackFn] = None

    def validate(self, payload: Any) -> Optional[BlockPayload]:
        """Validated payload model, or None when the payload is empty or invalid."""
        if not payload or not isinstance(payload, Mapping):
            return None
        try:
            return self.payload_schema.model_validate(dict(payload))
        except ValidationError as exc:
            logger.warning(
                "Invalid %s content (%d errors); treating block as empty",
                self.kind.value,
                exc.error_count(),
            )
            return None

    def default_content(self, event: Optional[EventDetails]) -> Optional[BlockPayload]:
        """Validated fallback content derived from the event, if any."""
        if self.fallback is None or event is None:
            return None
        return self.validate(self.fallback(event))

    def present(
        self,
        block: ResolvedBlock,
        event: Optional[EventDetails] = None,
    ) -> Optional[PresentedBlock]:
        """Presentable block, or None when there is nothing to show."""
        data = self.validate(block.payload)
        is_fallback = False
        if data is None:
            data = self.default_content(event)
            is_fallback = data is not None
        if data is None:
            return None

        return PresentedBlock(
            kind=block.kind,
            data=data.model_dump(mode="json", by_alias=True),
            color_scheme=block.color_scheme,
            is_fallback=is_fallback,
        )


FALLBACKS: Dict[BlockKind, FallbackFn] = {
    BlockKind.HERO: hero_fallback,
    BlockKind.LOCATION: location_fallback,
    BlockKind.RSVP: rsvp_fallback,
}

PRESENTERS: Dict[BlockKind, BlockPresenter] = {
    definition.kind: BlockPresenter(
        kind=definition.kind,
        payload_schema=definition.payload_schema,
        fallback=FALLBACKS.get(definition.kind),
    )
    for definition in list_definitions()
}


def get_presenter(kind: Any) -> Optional[BlockPresenter]:
    """Presenter for a block kind, None when unknown."""
    block_kind = coerce_kind(kind)
    if block_kind is None or get_definition(block_kind) is None:
        return None
    return PRESENTERS.get(block_kind)


def present(
    resolved: Iterable[ResolvedBlock],
    event: Optional[EventDetails] = None,
) -> List[PresentedBlock]:
    """
    Turn resolved blocks into presentable ones, in the same order.

    Blocks with neither valid content nor a fallback are skipped.
    """
    presented = []
    for block in resolved:
        presenter = get_presenter(block.kind)
        if presenter is None:
            continue
        item = presenter.present(block, event)
        if item is not None:
            presented.append(item)
    return presented


def seed_block_content(event: EventDetails) -> Dict[str, Dict[str, Any]]:
    """Initial block content for a new event, from the fallbacks."""
    content = {}
    for kind, presenter in PRESENTERS.items():
        data = presenter.default_content(event)
        if data is not None:
            content[kind.value] = data.model_dump(mode="json", by_alias=True, exclude_none=True)
    return content
