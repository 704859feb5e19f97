"""
render_resolver.py — Ordered list of blocks ready for presentation.
"""

from typing import Any, Mapping, Optional, Tuple

from invitations.components.registry import sort_blocks
from invitations.dsl.schema import InvitationConfig, ResolvedBlock


def resolve(
    config: InvitationConfig,
    content: Optional[Mapping[str, Any]] = None,
) -> Tuple[ResolvedBlock, ...]:
    """
    Resolve a configuration and its block content into renderable entries.

    Only enabled blocks are returned, sorted by ``order`` with registration
    order as the tie-breaker. A block without content gets an empty
    payload; what that renders as is up to the block's presenter. The color
    scheme is global and attached to every entry.

    Args:
        config: A reconciled configuration
        content: Block kind -> payload (missing, None or partial is fine)

    Returns:
        Immutable, deterministic sequence of ResolvedBlock
    """
    if not isinstance(content, Mapping):
        content = {}

    resolved = []
    for block in sort_blocks([b for b in config.enabled_blocks if b.enabled]):
        payload = content.get(block.type.value)
        if payload is None:
            payload = content.get(block.type)
        if payload is None:
            payload = {}
        resolved.append(ResolvedBlock(
            kind=block.type,
            payload=payload,
            color_scheme=config.color_scheme,
        ))
    return tuple(resolved)
