"""
reconcile.py — Turn stored invitation settings into a valid configuration.

Stored settings can be missing, partial, written by an older version of the
editor, or hand-edited. ``reconcile`` accepts any value and always returns a
configuration that satisfies the block invariants:

- every registered kind appears exactly once, unknown kinds are dropped
- ``order`` values are pairwise distinct
- blocks are sorted by ``order`` (registration order breaks ties)

Data that is structurally valid but incomplete is repaired in place: user
enablement and ordering are kept, missing kinds are appended after the last
preserved block. Anything structurally broken (no ``eventType``, malformed
entries, colliding orders) is replaced by the category defaults rather than
guessed at.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel

from invitations.components.base import BlockDefinition
from invitations.components.registry import get_definition, list_definitions, sort_blocks
from invitations.dsl.schema import BlockConfig, BlockKind, ColorScheme, InvitationConfig, coerce_kind
from invitations.engine.color_schemes import is_valid_scheme
from invitations.engine.config_builder import build_default_config, default_styles_for

logger = logging.getLogger(__name__)


# Older documents named fields differently; first key present wins
KIND_KEYS = ("type", "kind", "block", "id")
ENABLED_KEYS = ("enabled", "visible")
BLOCK_LIST_KEYS = ("enabledBlocks", "enabled_blocks", "blocks")
EVENT_TYPE_KEYS = ("eventType", "event_type")
COLOR_SCHEME_KEYS = ("colorScheme", "color_scheme")
CUSTOM_STYLES_KEYS = ("customStyles", "custom_styles")

_MISSING = object()


class StructuralError(ValueError):
    """Stored settings cannot be repaired and must be rebuilt."""


# =============================================================================
# PUBLIC API
# =============================================================================

def reconcile(persisted: Any, category: Any) -> InvitationConfig:
    """
    Reconcile stored settings against the current block registry.

    Never raises: any anomaly degrades to the defaults for ``category``.

    Args:
        persisted: Stored settings document (any shape, possibly None)
        category: Event category, used for every default that has to be filled in

    Returns:
        A valid InvitationConfig
    """
    document = _as_document(persisted)
    if document is None:
        logger.warning(
            "Stored settings are not an object (%s); rebuilding %s defaults",
            type(persisted).__name__,
            category,
        )
        return build_default_config(category)

    event_type = _first(document, EVENT_TYPE_KEYS)
    if not isinstance(event_type, str) or not event_type.strip():
        logger.warning("Stored settings have no eventType; rebuilding %s defaults", category)
        return build_default_config(category)

    raw_blocks = _first(document, BLOCK_LIST_KEYS)
    if not isinstance(raw_blocks, (list, tuple)):
        logger.warning("Stored settings have no block list; rebuilding %s defaults", category)
        return build_default_config(category)

    try:
        preserved = collect_known_blocks(raw_blocks, category)
    except StructuralError as exc:
        logger.warning("Stored blocks are malformed (%s); rebuilding %s defaults", exc, category)
        return build_default_config(category)

    return InvitationConfig(
        event_type=event_type,
        enabled_blocks=complete_blocks(preserved, category),
        color_scheme=_reconcile_color_scheme(_first(document, COLOR_SCHEME_KEYS), category),
        custom_styles=_reconcile_custom_styles(_first(document, CUSTOM_STYLES_KEYS), category),
    )


def collect_known_blocks(raw_blocks: Any, category: Any) -> Dict[BlockKind, BlockConfig]:
    """
    Validate stored block entries and keep the ones the registry knows.

    Entries naming unknown kinds are dropped. Legacy key names are migrated.

    Raises:
        StructuralError: On non-object entries, bad ``enabled``/``order``
            values, duplicate kinds or colliding orders
    """
    preserved: Dict[BlockKind, BlockConfig] = {}
    taken_orders: Dict[int, BlockKind] = {}

    for index, entry in enumerate(raw_blocks):
        if not isinstance(entry, Mapping):
            raise StructuralError(f"entry {index} is not an object")

        raw_kind = _first(entry, KIND_KEYS)
        definition = get_definition(raw_kind)
        if definition is None:
            logger.warning("Dropping unknown block %r", raw_kind)
            continue

        kind = definition.kind
        if kind in preserved:
            raise StructuralError(f"block '{kind.value}' appears more than once")

        order = _entry_order(entry, kind)
        if order in taken_orders:
            raise StructuralError(
                f"blocks '{taken_orders[order].value}' and '{kind.value}' share order {order}"
            )

        taken_orders[order] = kind
        preserved[kind] = BlockConfig(
            type=kind,
            enabled=_entry_enabled(entry, definition, category),
            order=order,
            settings=_entry_settings(entry),
        )

    return preserved


def complete_blocks(preserved: Mapping[BlockKind, BlockConfig], category: Any) -> List[BlockConfig]:
    """
    Fill in a record for every registered kind missing from ``preserved``.

    Synthesized blocks go after the highest preserved order, in registration
    order. With nothing preserved they take their default orders.
    """
    next_order: Optional[int] = None
    if preserved:
        next_order = max(block.order for block in preserved.values()) + 1

    blocks: List[BlockConfig] = []
    synthesized: List[str] = []
    for definition in list_definitions():
        existing = preserved.get(definition.kind)
        if existing is not None:
            blocks.append(existing)
            continue

        if next_order is None:
            order = definition.default_order
        else:
            order = next_order
            next_order += 1

        blocks.append(BlockConfig(
            type=definition.kind,
            enabled=definition.enabled_for(category),
            order=order,
        ))
        synthesized.append(definition.kind.value)

    if synthesized:
        logger.warning("Added missing blocks: %s", ", ".join(synthesized))

    return sort_blocks(blocks)


# =============================================================================
# ENTRY FIELDS
# =============================================================================

def _entry_order(entry: Mapping, kind: BlockKind) -> int:
    value = entry.get("order", _MISSING)
    if value is _MISSING:
        raise StructuralError(f"block '{kind.value}' has no order")

    # bool is an int subclass but never a meaningful position
    if isinstance(value, bool):
        raise StructuralError(f"block '{kind.value}' has a boolean order")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass

    raise StructuralError(f"block '{kind.value}' has invalid order {value!r}")


def _entry_enabled(entry: Mapping, definition: BlockDefinition, category: Any) -> bool:
    value = _first(entry, ENABLED_KEYS, default=_MISSING)
    if value is _MISSING:
        return definition.enabled_for(category)
    if not isinstance(value, bool):
        raise StructuralError(f"block '{definition.kind.value}' has non-boolean enabled {value!r}")
    return value


def _entry_settings(entry: Mapping) -> Optional[Dict[str, Any]]:
    settings = entry.get("settings")
    if isinstance(settings, Mapping) and all(isinstance(key, str) for key in settings):
        return dict(settings)
    return None


# =============================================================================
# THEME
# =============================================================================

def _reconcile_color_scheme(raw: Any, category: Any) -> ColorScheme:
    if isinstance(raw, ColorScheme):
        return raw
    if is_valid_scheme(raw):
        return ColorScheme.model_validate(dict(raw))

    if raw is not None:
        logger.warning("Stored color scheme is incomplete; using %s defaults", category)
    return build_default_config(category).color_scheme


def _reconcile_custom_styles(raw: Any, category: Any) -> Dict[str, Any]:
    if isinstance(raw, Mapping) and all(isinstance(key, str) for key in raw):
        return dict(raw)

    if raw is not None:
        logger.warning("Stored custom styles are not an object; using %s defaults", category)
    return default_styles_for(category)


# =============================================================================
# HELPERS
# =============================================================================

def _as_document(persisted: Any) -> Optional[Mapping]:
    if isinstance(persisted, BaseModel):
        return persisted.model_dump(by_alias=True)
    if isinstance(persisted, Mapping):
        return persisted
    return None


def _first(mapping: Mapping, keys: tuple, default: Any = None) -> Any:
    for key in keys:
        if key in mapping:
            return mapping[key]
    return default
