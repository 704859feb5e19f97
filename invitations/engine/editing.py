"""
editing.py — Editor operations on an in-memory configuration.

Every operation returns a new InvitationConfig and leaves its input
untouched. Blocks are addressed by kind, never by list index. Unknown kinds
are tolerated as no-ops so a stale editor never breaks a configuration.
"""

import logging
from typing import Any, List

from invitations.components.registry import sort_blocks
from invitations.dsl.schema import BlockConfig, InvitationConfig, coerce_kind
from invitations.engine.color_schemes import default_scheme_for, normalize_category, with_color

logger = logging.getLogger(__name__)


def toggle(config: InvitationConfig, kind: Any) -> InvitationConfig:
    """Flip ``enabled`` on one block. No-op when the kind is not present."""
    block = _find(config, kind)
    if block is None:
        logger.debug("toggle: block %r not in configuration", kind)
        return config
    return set_enabled(config, block.type, not block.enabled)


def set_enabled(config: InvitationConfig, kind: Any, enabled: bool) -> InvitationConfig:
    """Set ``enabled`` on one block. No-op when the kind is not present."""
    block = _find(config, kind)
    if block is None or block.enabled == enabled:
        return config

    blocks = [
        entry.model_copy(update={"enabled": enabled}) if entry.type == block.type else entry
        for entry in config.enabled_blocks
    ]
    return config.model_copy(update={"enabled_blocks": blocks})


def reorder(config: InvitationConfig, dragged: Any, target: Any) -> InvitationConfig:
    """
    Swap the positions of two blocks (drag ``dragged`` onto ``target``).

    Only the two ``order`` values change; entries keep their list
    positions, so call ``sorted_blocks`` to display the new order. Swapping
    keeps orders unique. No-op if either kind is missing or both are the same.
    """
    dragged_block = _find(config, dragged)
    target_block = _find(config, target)
    if dragged_block is None or target_block is None:
        logger.debug("reorder: %r or %r not in configuration", dragged, target)
        return config
    if dragged_block.type == target_block.type:
        return config

    new_orders = {
        dragged_block.type: target_block.order,
        target_block.type: dragged_block.order,
    }
    blocks = [
        entry.model_copy(update={"order": new_orders[entry.type]}) if entry.type in new_orders else entry
        for entry in config.enabled_blocks
    ]
    return config.model_copy(update={"enabled_blocks": blocks})


def sorted_blocks(config: InvitationConfig) -> List[BlockConfig]:
    """Blocks in display order (``order`` ascending, registration order on ties)."""
    return sort_blocks(config.enabled_blocks)


def change_event_type(config: InvitationConfig, category: Any) -> InvitationConfig:
    """
    Switch the event category.

    The color scheme is replaced wholesale by the new category's default.
    Blocks and custom styles are kept as the user left them.
    """
    event_type = normalize_category(category)
    return config.model_copy(update={
        "event_type": event_type,
        "color_scheme": default_scheme_for(event_type),
    })


def update_color(config: InvitationConfig, slot: str, value: str) -> InvitationConfig:
    """
    Edit one color slot of the scheme.

    Raises:
        ValueError: If the slot does not exist or the value is not a string
    """
    return config.model_copy(update={"color_scheme": with_color(config.color_scheme, slot, value)})


def _find(config: InvitationConfig, kind: Any):
    block_kind = coerce_kind(kind)
    if block_kind is None:
        return None
    return config.get_block(block_kind)
