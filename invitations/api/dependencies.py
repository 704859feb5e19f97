"""FastAPI dependencies for the invitation engine API."""

from typing import Annotated

from fastapi import Depends, Path

from invitations.api.config import Settings, get_settings
from invitations.store import EVENT_ID_PATTERN, SettingsStore, get_settings_store


def get_store(settings: Settings = Depends(get_settings)) -> SettingsStore:
    """Settings store backing the event routes."""
    return get_settings_store(settings.storage_dir)


# Type aliases for cleaner route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
Store = Annotated[SettingsStore, Depends(get_store)]
EventId = Annotated[str, Path(pattern=EVENT_ID_PATTERN, description="Event identifier")]
