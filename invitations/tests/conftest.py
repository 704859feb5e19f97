"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from invitations.api.dependencies import get_store
from invitations.dsl.schema import EventDetails, InvitationConfig
from invitations.engine import build_default_config
from invitations.store import SettingsStore


@pytest.fixture
def wedding_config() -> InvitationConfig:
    """Default configuration of a wedding."""
    return build_default_config("wedding")


@pytest.fixture
def event() -> EventDetails:
    """Event record used for fallback content."""
    return EventDetails(
        id="evt_1",
        title="Ana & Luis",
        description="We are getting married",
        date="2026-06-20",
        time="18:00",
        location="Hacienda San Gabriel, Puebla",
    )


@pytest.fixture
def content() -> dict:
    """Block content as written by the editor."""
    return {
        "hero": {"title": "Ana & Luis", "subtitle": "June 20th", "dateSize": "large"},
        "location": {"address": "Hacienda San Gabriel", "parkingInfo": "Valet parking"},
        "timeline": {"events": [{"time": "18:00", "title": "Ceremony"}]},
        "story": {"title": "How we met", "content": "At university."},
    }


@pytest.fixture
def store() -> SettingsStore:
    """Fresh in-memory settings store."""
    return SettingsStore()


@pytest.fixture
def client(store):
    """Create test client backed by a fresh store."""
    from invitations.api.main import create_app

    app = create_app()
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as client:
        yield client
