"""Pydantic v2 models for the invitation configuration language.

An invitation page is described by an ``InvitationConfig``: the event
category, one ``BlockConfig`` per known block kind (enabled or not), a
global ``ColorScheme`` and an opaque bag of custom styles. Block content
lives next to it as a plain mapping of block kind to payload.

Models serialise with camelCase keys (``eventType``, ``enabledBlocks``,
``textLight`` ...) to stay compatible with stored event settings, while
Python code uses snake_case attributes. Input accepts either spelling.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BlockKind(str, Enum):
    """Closed set of block kinds, in registration order."""

    HERO = "hero"
    TIMELINE = "timeline"
    LOCATION = "location"
    MENU = "menu"
    RSVP = "rsvp"
    GALLERY = "gallery"
    STORY = "story"
    GIFTS = "gifts"
    DRESSCODE = "dresscode"
    FAQ = "faq"


def coerce_kind(value: Any) -> Optional[BlockKind]:
    """Map a raw value onto a BlockKind.

    Strings are matched case-insensitively. Anything that does not name a
    known kind returns None; callers treat that as an unknown/legacy block.
    """
    if isinstance(value, BlockKind):
        return value
    if not isinstance(value, str):
        return None
    try:
        return BlockKind(value.strip().lower())
    except ValueError:
        return None


class CamelModel(BaseModel):
    """Frozen base model with camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ============================================================================
# Theming
# ============================================================================


class ColorScheme(CamelModel):
    """The six color slots shared by every block of an invitation."""

    primary: str = Field(description="Main brand color")
    secondary: str = Field(description="Secondary color")
    accent: str = Field(description="Accent color")
    background: str = Field(description="Page background")
    text: str = Field(description="Body text color")
    text_light: str = Field(description="Muted text color")


COLOR_SLOTS: tuple[str, ...] = tuple(ColorScheme.model_fields)


# ============================================================================
# Configuration
# ============================================================================


class BlockConfig(CamelModel):
    """Per-event enablement and position of one block kind."""

    type: BlockKind
    enabled: bool
    order: int = Field(description="Sole sort key, unique within a configuration")
    settings: Optional[dict[str, Any]] = Field(
        default=None,
        description="Per-block options, passed through untouched",
    )


class InvitationConfig(CamelModel):
    """Root persisted object for one event's invitation page."""

    event_type: str = Field(min_length=1, description="Event category (wedding, birthday, ...)")
    enabled_blocks: list[BlockConfig] = Field(
        default_factory=list,
        description="Every block record, enabled or not",
    )
    color_scheme: ColorScheme
    custom_styles: dict[str, Any] = Field(
        default_factory=dict,
        description="Typography and spacing options, not interpreted by the engine",
    )

    def get_block(self, kind: BlockKind) -> Optional[BlockConfig]:
        """Return the record for a kind, or None."""
        for block in self.enabled_blocks:
            if block.type == kind:
                return block
        return None

    def to_document(self) -> dict[str, Any]:
        """Serialise to the JSON document shape used in storage."""
        return self.model_dump(mode="json", by_alias=True)


# ============================================================================
# Render output
# ============================================================================


class ResolvedBlock(CamelModel):
    """One renderable entry: block kind, its content and the page colors."""

    kind: BlockKind
    payload: Any = Field(default_factory=dict)
    color_scheme: ColorScheme


class EventDetails(CamelModel):
    """Event record fields used to derive default block content."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    title: str = ""
    description: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    location: Optional[str] = None
    whatsapp_number: Optional[str] = None


class PresentedBlock(CamelModel):
    """A resolved block whose content passed its kind's validation."""

    kind: BlockKind
    data: dict[str, Any] = Field(default_factory=dict)
    color_scheme: ColorScheme
    is_fallback: bool = Field(
        default=False,
        description="True when the data was derived from the event record",
    )
