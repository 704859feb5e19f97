"""
color_schemes.py — Event categories and their default color schemes.

Provides:
- The category catalog (wedding, birthday, corporate)
- Default color scheme lookup with a neutral fallback
- Structural validation of stored color schemes
- Field-by-field color editing
"""

from dataclasses import dataclass
from typing import Any, List, Mapping

from invitations.dsl.schema import ColorScheme


# =============================================================================
# CATEGORIES
# =============================================================================

NEUTRAL_CATEGORY = "general"


@dataclass(frozen=True)
class EventCategory:
    """An event category offered when creating an invitation."""
    id: str
    name: str
    description: str
    icon: str


EVENT_CATEGORIES = (
    EventCategory(
        id="wedding",
        name="Wedding",
        description="Elegant invitation for weddings",
        icon="heart",
    ),
    EventCategory(
        id="birthday",
        name="Birthday",
        description="Festive invitation for birthdays",
        icon="cake",
    ),
    EventCategory(
        id="corporate",
        name="Corporate event",
        description="Professional invitation for company events",
        icon="briefcase",
    ),
)


# =============================================================================
# DEFAULT SCHEMES
# =============================================================================

DEFAULT_COLOR_SCHEMES = {
    "wedding": ColorScheme(
        primary="#8B4F4F",      # burgundy
        secondary="#F5E6D3",    # cream
        accent="#D4AF37",       # gold
        background="#FFFFFF",
        text="#2D2D2D",
        text_light="#6B6B6B",
    ),
    "birthday": ColorScheme(
        primary="#FF6B9D",      # pink
        secondary="#C8A2FF",    # purple
        accent="#FFD93D",       # yellow
        background="#FFF5F8",
        text="#2D2D2D",
        text_light="#6B6B6B",
    ),
    "corporate": ColorScheme(
        primary="#1E3A8A",      # navy
        secondary="#3B82F6",    # blue
        accent="#10B981",       # green
        background="#F9FAFB",
        text="#1F2937",
        text_light="#6B7280",
    ),
}

NEUTRAL_COLOR_SCHEME = ColorScheme(
    primary="#374151",
    secondary="#E5E7EB",
    accent="#9CA3AF",
    background="#FFFFFF",
    text="#111827",
    text_light="#6B7280",
)


def normalize_category(category: Any) -> str:
    """Canonical category id: stripped and lower-cased.

    Non-string or blank values map to the neutral category.
    """
    if isinstance(category, str) and category.strip():
        return category.strip().lower()
    return NEUTRAL_CATEGORY


def default_scheme_for(category: Any) -> ColorScheme:
    """
    Default color scheme for an event category.

    Args:
        category: Case-insensitive category id

    Returns:
        The category scheme, or the neutral scheme for anything unrecognised
    """
    return DEFAULT_COLOR_SCHEMES.get(normalize_category(category), NEUTRAL_COLOR_SCHEME)


def list_categories() -> List[EventCategory]:
    """Return the category catalog."""
    return list(EVENT_CATEGORIES)


def is_known_category(category: Any) -> bool:
    """Whether a category has its own default scheme."""
    return normalize_category(category) in DEFAULT_COLOR_SCHEMES


# =============================================================================
# VALIDATION AND EDITING
# =============================================================================

def _slot_keys(slot: str) -> tuple:
    field = ColorScheme.model_fields[slot]
    return (field.alias or slot, slot)


def is_valid_scheme(data: Any) -> bool:
    """
    Check that stored data holds all six color slots as strings.

    Slots may use either the stored camelCase key or the attribute name.
    """
    if isinstance(data, ColorScheme):
        return True
    if not isinstance(data, Mapping):
        return False

    for slot in ColorScheme.model_fields:
        value = next((data[key] for key in _slot_keys(slot) if key in data), None)
        if not isinstance(value, str):
            return False
    return True


def resolve_slot(slot: str) -> str:
    """
    Map a slot name (``textLight`` or ``text_light``) to the attribute name.

    Raises:
        ValueError: If the slot does not exist
    """
    for name in ColorScheme.model_fields:
        if slot in _slot_keys(name):
            return name
    raise ValueError(f"Unknown color slot: {slot}")


def with_color(scheme: ColorScheme, slot: str, value: str) -> ColorScheme:
    """
    Return a copy of the scheme with one slot replaced.

    Raises:
        ValueError: If the slot does not exist or the value is not a string
    """
    name = resolve_slot(slot)
    if not isinstance(value, str):
        raise ValueError(f"Color for '{slot}' must be a string")
    return scheme.model_copy(update={name: value})
