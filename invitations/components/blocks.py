"""Built-in block definitions, in registration order."""

from invitations.components.base import BlockDefinition
from invitations.components.parameters import (
    DressCodeBlockData,
    FaqBlockData,
    GalleryBlockData,
    GiftsBlockData,
    HeroBlockData,
    LocationBlockData,
    MenuBlockData,
    RsvpBlockData,
    StoryBlockData,
    TimelineBlockData,
)
from invitations.dsl.schema import BlockKind

BUILTIN_BLOCKS: tuple[BlockDefinition, ...] = (
    BlockDefinition(
        kind=BlockKind.HERO,
        display_name="Hero / Main banner",
        description="Title, date and countdown",
        default_enabled=True,
        default_order=0,
        payload_schema=HeroBlockData,
    ),
    BlockDefinition(
        kind=BlockKind.TIMELINE,
        display_name="Schedule",
        description="Hour-by-hour event itinerary",
        default_enabled=True,
        default_order=3,
        payload_schema=TimelineBlockData,
    ),
    BlockDefinition(
        kind=BlockKind.LOCATION,
        display_name="Location",
        description="Map and directions",
        default_enabled=True,
        default_order=2,
        payload_schema=LocationBlockData,
    ),
    BlockDefinition(
        kind=BlockKind.MENU,
        display_name="Menu",
        description="Food and drinks served at the event",
        default_enabled=True,
        default_order=4,
        payload_schema=MenuBlockData,
        category_enabled={"corporate": False},
    ),
    BlockDefinition(
        kind=BlockKind.RSVP,
        display_name="RSVP",
        description="Attendance confirmation form",
        default_enabled=True,
        default_order=5,
        payload_schema=RsvpBlockData,
    ),
    BlockDefinition(
        kind=BlockKind.GALLERY,
        display_name="Photo gallery",
        description="Collection of event pictures",
        default_enabled=False,
        default_order=7,
        payload_schema=GalleryBlockData,
        category_enabled={"birthday": True},
    ),
    BlockDefinition(
        kind=BlockKind.STORY,
        display_name="Story",
        description="Story of the couple or the person celebrated",
        default_enabled=True,
        default_order=1,
        payload_schema=StoryBlockData,
        category_enabled={"birthday": False, "corporate": False},
    ),
    BlockDefinition(
        kind=BlockKind.GIFTS,
        display_name="Gift registry",
        description="Registry links and bank details",
        default_enabled=True,
        default_order=6,
        payload_schema=GiftsBlockData,
        category_enabled={"birthday": False, "corporate": False},
    ),
    BlockDefinition(
        kind=BlockKind.DRESSCODE,
        display_name="Dress code",
        description="Expected attire",
        default_enabled=True,
        default_order=8,
        payload_schema=DressCodeBlockData,
        category_enabled={"birthday": False, "corporate": False},
    ),
    BlockDefinition(
        kind=BlockKind.FAQ,
        display_name="FAQ",
        description="Frequently asked questions for guests",
        default_enabled=False,
        default_order=9,
        payload_schema=FaqBlockData,
        category_enabled={"corporate": True},
    ),
)
