"""Tests for the configuration language models."""

import pytest
from pydantic import ValidationError

from invitations.dsl.schema import (
    COLOR_SLOTS,
    BlockConfig,
    BlockKind,
    ColorScheme,
    EventDetails,
    InvitationConfig,
    coerce_kind,
)


SCHEME = {
    "primary": "#111111",
    "secondary": "#222222",
    "accent": "#333333",
    "background": "#FFFFFF",
    "text": "#000000",
    "textLight": "#666666",
}


class TestBlockKind:
    """Tests for block kind coercion."""

    def test_coerce_known_kind(self):
        """Known kind strings map onto the enum."""
        assert coerce_kind("hero") is BlockKind.HERO
        assert coerce_kind(BlockKind.RSVP) is BlockKind.RSVP

    def test_coerce_is_case_insensitive(self):
        """Case and surrounding whitespace are ignored."""
        assert coerce_kind("  DressCode ") is BlockKind.DRESSCODE

    def test_coerce_unknown_kind(self):
        """Unknown or non-string values return None."""
        assert coerce_kind("obsolete_block") is None
        assert coerce_kind(None) is None
        assert coerce_kind(3) is None


class TestColorScheme:
    """Tests for ColorScheme."""

    def test_six_slots(self):
        """The scheme has exactly six slots."""
        assert COLOR_SLOTS == ("primary", "secondary", "accent", "background", "text", "text_light")

    def test_accepts_camel_case(self):
        """Stored camelCase keys populate snake_case attributes."""
        scheme = ColorScheme.model_validate(SCHEME)
        assert scheme.text_light == "#666666"

    def test_dumps_camel_case(self):
        """Serialisation uses the stored key names."""
        dumped = ColorScheme.model_validate(SCHEME).model_dump(by_alias=True)
        assert "textLight" in dumped
        assert "text_light" not in dumped

    def test_missing_slot_rejected(self):
        """Every slot is required."""
        data = dict(SCHEME)
        del data["accent"]
        with pytest.raises(ValidationError):
            ColorScheme.model_validate(data)

    def test_frozen(self):
        """Schemes are immutable."""
        scheme = ColorScheme.model_validate(SCHEME)
        with pytest.raises(ValidationError):
            scheme.primary = "#000000"


class TestInvitationConfig:
    """Tests for InvitationConfig."""

    def test_to_document_shape(self):
        """Documents use camelCase keys and plain strings for kinds."""
        config = InvitationConfig(
            event_type="wedding",
            enabled_blocks=[BlockConfig(type=BlockKind.HERO, enabled=True, order=0)],
            color_scheme=ColorScheme.model_validate(SCHEME),
        )
        document = config.to_document()

        assert set(document) == {"eventType", "enabledBlocks", "colorScheme", "customStyles"}
        assert document["enabledBlocks"][0] == {
            "type": "hero",
            "enabled": True,
            "order": 0,
            "settings": None,
        }

    def test_document_round_trip(self):
        """A dumped document validates back to an equal model."""
        config = InvitationConfig(
            event_type="birthday",
            enabled_blocks=[BlockConfig(type="gallery", enabled=False, order=7)],
            color_scheme=SCHEME,
            custom_styles={"fontFamily": "serif"},
        )
        assert InvitationConfig.model_validate(config.to_document()) == config

    def test_empty_event_type_rejected(self):
        """eventType must be a non-empty string."""
        with pytest.raises(ValidationError):
            InvitationConfig(event_type="", color_scheme=SCHEME)

    def test_get_block(self):
        """Blocks are looked up by kind."""
        config = InvitationConfig(
            event_type="wedding",
            enabled_blocks=[BlockConfig(type=BlockKind.MENU, enabled=True, order=4)],
            color_scheme=SCHEME,
        )
        assert config.get_block(BlockKind.MENU).order == 4
        assert config.get_block(BlockKind.FAQ) is None


class TestEventDetails:
    """Tests for EventDetails."""

    def test_ignores_unknown_fields(self):
        """Extra event record fields are ignored."""
        event = EventDetails.model_validate({
            "title": "Party",
            "whatsappNumber": "+5215555555555",
            "ownerId": "u_1",
        })
        assert event.title == "Party"
        assert event.whatsapp_number == "+5215555555555"
