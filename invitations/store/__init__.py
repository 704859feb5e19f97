"""Settings storage module - per-event settings documents."""

from invitations.store.settings_store import (
    EVENT_ID_PATTERN,
    SettingsStore,
    get_settings_store,
)

__all__ = [
    "EVENT_ID_PATTERN",
    "SettingsStore",
    "get_settings_store",
]
