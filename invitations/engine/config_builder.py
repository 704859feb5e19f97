"""
config_builder.py — Default configuration for newly created events.
"""

import logging
from typing import Any, Dict

from invitations.components.registry import list_definitions, sort_blocks
from invitations.dsl.schema import BlockConfig, InvitationConfig
from invitations.engine.color_schemes import default_scheme_for, normalize_category

logger = logging.getLogger(__name__)


# Typography defaults per category; opaque values for the presentation layer
CATEGORY_STYLES: Dict[str, Dict[str, str]] = {
    "wedding": {"fontFamily": "serif", "fontSize": "16px", "headerFont": "playfair"},
}
DEFAULT_STYLES: Dict[str, str] = {
    "fontFamily": "sans-serif",
    "fontSize": "16px",
    "headerFont": "sans-serif",
}


def default_styles_for(category: Any) -> Dict[str, str]:
    """Custom style defaults for a category (a fresh dict on every call)."""
    return dict(CATEGORY_STYLES.get(normalize_category(category), DEFAULT_STYLES))


def default_blocks_for(category: Any) -> list[BlockConfig]:
    """One block record per registered kind, at its default position."""
    blocks = [
        BlockConfig(
            type=definition.kind,
            enabled=definition.enabled_for(category),
            order=definition.default_order,
        )
        for definition in list_definitions()
    ]
    return sort_blocks(blocks)


def build_default_config(category: Any) -> InvitationConfig:
    """
    Build a complete configuration for a new event.

    Every registered block is present, disabled ones included, so that
    enabling a block later keeps its default position. Unrecognised
    categories get the neutral color scheme and generic block defaults.

    Args:
        category: Event category id (wedding, birthday, corporate, ...)

    Returns:
        A valid InvitationConfig
    """
    event_type = normalize_category(category)
    config = InvitationConfig(
        event_type=event_type,
        enabled_blocks=default_blocks_for(event_type),
        color_scheme=default_scheme_for(event_type),
        custom_styles=default_styles_for(event_type),
    )
    logger.debug(
        "Built default config for %s: %d blocks, %d enabled",
        event_type,
        len(config.enabled_blocks),
        sum(1 for block in config.enabled_blocks if block.enabled),
    )
    return config
