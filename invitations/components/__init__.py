"""Block catalog - definitions, registry and content payload schemas."""

from invitations.components.base import BlockDefinition
from invitations.components.registry import (
    BlockTypeRegistry,
    registry,
    list_definitions,
    get_definition,
    block_sort_key,
    sort_blocks,
)
from invitations.components.parameters import (
    BlockPayload,
    HeroBlockData,
    TimelineBlockData,
    LocationBlockData,
    MenuBlockData,
    RsvpBlockData,
    GalleryBlockData,
    StoryBlockData,
    GiftsBlockData,
    DressCodeBlockData,
    FaqBlockData,
    get_payload_schema,
    validate_payload,
)

__all__ = [
    # Definitions
    "BlockDefinition",
    # Registry
    "BlockTypeRegistry",
    "registry",
    "list_definitions",
    "get_definition",
    "block_sort_key",
    "sort_blocks",
    # Payloads
    "BlockPayload",
    "HeroBlockData",
    "TimelineBlockData",
    "LocationBlockData",
    "MenuBlockData",
    "RsvpBlockData",
    "GalleryBlockData",
    "StoryBlockData",
    "GiftsBlockData",
    "DressCodeBlockData",
    "FaqBlockData",
    "get_payload_schema",
    "validate_payload",
]
