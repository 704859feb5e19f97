"""Block type registry: the catalog of block kinds an invitation can use."""

from typing import Any

from invitations.components.base import BlockDefinition
from invitations.dsl.schema import BlockConfig, BlockKind, coerce_kind


class BlockTypeRegistry:
    """Registry of block definitions.

    Definitions are kept in registration order, which is also the
    secondary sort key when two blocks would otherwise compare equal.
    Lookups never raise for unknown kinds: stale kinds coming from stored
    data are simply "not found".
    """

    _instance: "BlockTypeRegistry | None" = None
    _definitions: dict[BlockKind, BlockDefinition]

    def __new__(cls) -> "BlockTypeRegistry":
        """Singleton pattern for global registry."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._definitions = {}
        return cls._instance

    def register(self, definition: BlockDefinition) -> BlockDefinition:
        """Register a block definition.

        Args:
            definition: The definition to add.

        Returns:
            The same definition.

        Raises:
            ValueError: If the kind or its default order is already taken.
        """
        if definition.kind in self._definitions:
            raise ValueError(f"Block '{definition.kind.value}' is already registered")

        for existing in self._definitions.values():
            if existing.default_order == definition.default_order:
                raise ValueError(
                    f"Default order {definition.default_order} of '{definition.kind.value}' "
                    f"is already used by '{existing.kind.value}'"
                )

        self._definitions[definition.kind] = definition
        return definition

    def get(self, kind: Any) -> BlockDefinition | None:
        """Get a definition by kind.

        Args:
            kind: BlockKind or raw kind string.

        Returns:
            Definition or None if the kind is unknown.
        """
        block_kind = coerce_kind(kind)
        if block_kind is None:
            return None
        return self._definitions.get(block_kind)

    def get_or_raise(self, kind: Any) -> BlockDefinition:
        """Get a definition by kind, raising if not found.

        Raises:
            KeyError: If the kind is unknown.
        """
        definition = self.get(kind)
        if definition is None:
            raise KeyError(f"Block '{kind}' not found in registry")
        return definition

    def is_known(self, kind: Any) -> bool:
        """Check whether a kind is registered."""
        return self.get(kind) is not None

    def list_definitions(self) -> tuple[BlockDefinition, ...]:
        """All definitions in registration order."""
        return tuple(self._definitions.values())

    def list_kinds(self) -> list[BlockKind]:
        """All registered kinds in registration order."""
        return list(self._definitions.keys())

    def registration_index(self, kind: Any) -> int:
        """Position of a kind in registration order.

        Unknown kinds sort after every registered one.
        """
        block_kind = coerce_kind(kind)
        for index, registered in enumerate(self._definitions):
            if registered == block_kind:
                return index
        return len(self._definitions)

    def get_definition_info(self, kind: Any) -> dict[str, Any] | None:
        """Get information about a block kind, including its payload schema."""
        definition = self.get(kind)
        if definition is None:
            return None
        return definition.to_info()

    def __len__(self) -> int:
        return len(self._definitions)


def _register_builtin_blocks(target: BlockTypeRegistry) -> None:
    from invitations.components.blocks import BUILTIN_BLOCKS

    for definition in BUILTIN_BLOCKS:
        if not target.is_known(definition.kind):
            target.register(definition)


# Global registry instance
registry = BlockTypeRegistry()
_register_builtin_blocks(registry)


def list_definitions() -> tuple[BlockDefinition, ...]:
    """All block definitions in registration order."""
    return registry.list_definitions()


def get_definition(kind: Any) -> BlockDefinition | None:
    """Get a block definition by kind, None when unknown."""
    return registry.get(kind)


def block_sort_key(block: BlockConfig) -> tuple[int, int]:
    """Sort key for block records: ``order`` first, then registration order."""
    return (block.order, registry.registration_index(block.type))


def sort_blocks(blocks: list[BlockConfig]) -> list[BlockConfig]:
    """Return block records sorted by position."""
    return sorted(blocks, key=block_sort_key)
