"""Content payload schemas for invitation blocks.

The engine treats block content as opaque. These models describe what each
block's presenter expects, and are used only when a payload is validated
for presentation. Unknown keys are ignored so older payloads keep working.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ============================================================================
# Base Payload Model
# ============================================================================


class BlockPayload(BaseModel):
    """Base class for all block content payloads."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ============================================================================
# Block-Specific Payload Models
# ============================================================================


class HeroBlockData(BlockPayload):
    """Main banner with title, date and countdown."""

    title: str = Field(min_length=1, description="Headline, usually the event title")
    subtitle: Optional[str] = None
    background_image: Optional[str] = Field(default=None, description="Image URL")
    show_countdown: bool = True
    text_shadow: Optional[str] = None
    text_color: Optional[str] = None
    date_color: Optional[str] = None
    date_shadow: Optional[str] = None
    date_size: Literal["small", "medium", "large"] = "medium"


class TimelineEntry(BlockPayload):
    """A single entry of the event schedule."""

    time: str
    title: str
    description: Optional[str] = None
    icon: Optional[str] = None


class TimelineBlockData(BlockPayload):
    """Hour-by-hour schedule."""

    events: list[TimelineEntry] = Field(default_factory=list)


class Coordinates(BlockPayload):
    """Latitude/longitude pair."""

    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


class LocationBlockData(BlockPayload):
    """Venue address and directions."""

    address: str = Field(min_length=1)
    coordinates: Optional[Coordinates] = None
    directions: Optional[str] = None
    parking_info: Optional[str] = None


class MenuItem(BlockPayload):
    """A dish or drink."""

    name: str
    description: Optional[str] = None
    allergens: list[str] = Field(default_factory=list)


class MenuSection(BlockPayload):
    """Named group of menu items (starters, mains ...)."""

    name: str
    items: list[MenuItem] = Field(default_factory=list)


class MenuBlockData(BlockPayload):
    """Food and drinks served at the event."""

    sections: list[MenuSection] = Field(default_factory=list)


class RsvpQuestion(BlockPayload):
    """Custom question appended to the RSVP form."""

    id: str
    question: str
    type: Literal["text", "select", "checkbox"] = "text"
    required: bool = False
    options: Optional[list[str]] = None


class RsvpBlockData(BlockPayload):
    """Attendance confirmation form."""

    deadline: Optional[str] = None
    require_email: bool = False
    require_phone: bool = False
    allow_plus_ones: bool = True
    max_guests_per_invite: int = Field(default=5, ge=1)
    custom_questions: list[RsvpQuestion] = Field(default_factory=list)


class GalleryImage(BlockPayload):
    """One gallery picture."""

    url: str
    caption: Optional[str] = None
    thumbnail: Optional[str] = None


class GalleryBlockData(BlockPayload):
    """Photo collection."""

    images: list[GalleryImage] = Field(default_factory=list)
    layout: Literal["grid", "masonry", "carousel"] = "grid"


class StoryMilestone(BlockPayload):
    """A dated milestone in the hosts' story."""

    year: str
    event: str


class StoryBlockData(BlockPayload):
    """Story of the couple or the person celebrated."""

    title: str
    content: str
    image: Optional[str] = None
    timeline: list[StoryMilestone] = Field(default_factory=list)


class GiftRegistry(BlockPayload):
    """Link to an external gift registry."""

    name: str
    url: str
    icon: Optional[str] = None


class BankDetails(BlockPayload):
    """Bank account for cash gifts."""

    account_name: str
    bank: str
    account_number: str
    account_type: str


class GiftsBlockData(BlockPayload):
    """Gift registries and bank details."""

    message: Optional[str] = None
    registries: list[GiftRegistry] = Field(default_factory=list)
    show_bank_account: bool = False
    bank_details: Optional[BankDetails] = None


class DressCodeBlockData(BlockPayload):
    """Expected attire."""

    code: str = Field(min_length=1)
    description: Optional[str] = None
    examples: list[str] = Field(default_factory=list)
    image: Optional[str] = None


class FaqEntry(BlockPayload):
    """Question and answer."""

    question: str
    answer: str


class FaqBlockData(BlockPayload):
    """Frequently asked questions."""

    questions: list[FaqEntry] = Field(default_factory=list)


# ============================================================================
# Payload Registry
# ============================================================================


BLOCK_PAYLOADS: dict[str, type[BlockPayload]] = {
    "hero": HeroBlockData,
    "timeline": TimelineBlockData,
    "location": LocationBlockData,
    "menu": MenuBlockData,
    "rsvp": RsvpBlockData,
    "gallery": GalleryBlockData,
    "story": StoryBlockData,
    "gifts": GiftsBlockData,
    "dresscode": DressCodeBlockData,
    "faq": FaqBlockData,
}


def get_payload_schema(block_type: str) -> type[BlockPayload] | None:
    """Get the payload schema for a block type."""
    return BLOCK_PAYLOADS.get(block_type)


def validate_payload(block_type: str, payload: dict[str, Any]) -> BlockPayload:
    """Validate a content payload for a block type.

    Args:
        block_type: The block type name.
        payload: Content dictionary.

    Returns:
        Validated payload model.

    Raises:
        ValueError: If block type is unknown.
        ValidationError: If the payload is invalid.
    """
    schema = get_payload_schema(block_type)
    if schema is None:
        raise ValueError(f"Unknown block type: {block_type}")
    return schema.model_validate(payload)
