"""Block definitions: the static description of each block kind."""

from dataclasses import dataclass, field
from typing import Any

from invitations.components.parameters import BlockPayload
from invitations.dsl.schema import BlockKind


@dataclass(frozen=True)
class BlockDefinition:
    """Registry entry describing one block kind.

    Definitions are immutable. ``default_order`` values are unique across
    the registry, so a configuration built from defaults never has two
    blocks at the same position.
    """

    kind: BlockKind
    display_name: str
    description: str
    default_enabled: bool
    default_order: int
    payload_schema: type[BlockPayload]
    # category id -> enabled, overriding default_enabled for that category
    category_enabled: dict[str, bool] = field(default_factory=dict, compare=False)

    def enabled_for(self, category: Any) -> bool:
        """Whether a new configuration for ``category`` enables this block.

        Unrecognised categories get ``default_enabled``.
        """
        if isinstance(category, str):
            override = self.category_enabled.get(category.strip().lower())
            if override is not None:
                return override
        return self.default_enabled

    def to_info(self) -> dict[str, Any]:
        """JSON-friendly description of the definition."""
        return {
            "kind": self.kind.value,
            "displayName": self.display_name,
            "description": self.description,
            "defaultEnabled": self.default_enabled,
            "defaultOrder": self.default_order,
            "categoryEnabled": dict(self.category_enabled),
            "payloadSchema": self.payload_schema.model_json_schema(by_alias=True),
        }
