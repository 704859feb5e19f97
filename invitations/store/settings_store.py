"""Key-value storage of per-event settings documents."""

import copy
import json
import logging
import re
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

EVENT_ID_PATTERN = r"^[A-Za-z0-9_-]{1,128}$"
_EVENT_ID_RE = re.compile(EVENT_ID_PATTERN)


class SettingsStore:
    """Storage of settings documents keyed by event id.

    Documents are opaque JSON objects; the store never interprets them.
    Supports both in-memory storage and file-based persistence (one
    ``<event_id>.json`` file per event). The last write wins.
    """

    def __init__(self, storage_path: Path | str | None = None) -> None:
        """Initialize the settings store.

        Args:
            storage_path: Optional directory for file-based persistence.
        """
        self._documents: dict[str, dict[str, Any]] = {}
        self._storage_path = Path(storage_path) if storage_path else None

        if self._storage_path:
            self._storage_path.mkdir(parents=True, exist_ok=True)
            self._load_from_disk()

    def put(self, event_id: str, document: dict[str, Any]) -> None:
        """Store the settings document of an event.

        Args:
            event_id: Event identifier.
            document: JSON-serialisable settings document.

        Raises:
            ValueError: If the event id is not a safe identifier.
        """
        _check_event_id(event_id)
        self._documents[event_id] = copy.deepcopy(document)

        if self._storage_path:
            self._save_to_disk(event_id)

    def get(self, event_id: str) -> dict[str, Any] | None:
        """Get the settings document of an event.

        Args:
            event_id: Event identifier.

        Returns:
            A copy of the document, or None if nothing is stored.
        """
        document = self._documents.get(event_id)
        if document is None:
            return None
        return copy.deepcopy(document)

    def delete(self, event_id: str) -> bool:
        """Delete an event's settings.

        Args:
            event_id: Event identifier.

        Returns:
            True if deleted, False if not found.
        """
        if event_id not in self._documents:
            return False

        del self._documents[event_id]
        if self._storage_path:
            file_path = self._storage_path / f"{event_id}.json"
            if file_path.exists():
                file_path.unlink()
        return True

    def list_ids(self) -> list[str]:
        """List stored event ids, sorted."""
        return sorted(self._documents)

    def count(self) -> int:
        """Get total number of stored documents."""
        return len(self._documents)

    def clear(self) -> None:
        """Remove every document. Use for testing."""
        self._documents.clear()

        if self._storage_path:
            for file in self._storage_path.glob("*.json"):
                file.unlink()

    def _save_to_disk(self, event_id: str) -> None:
        """Write one document to disk."""
        file_path = self._storage_path / f"{event_id}.json"
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self._documents[event_id], f, indent=2, default=str)

    def _load_from_disk(self) -> None:
        """Load all documents from disk."""
        for file_path in self._storage_path.glob("*.json"):
            event_id = file_path.stem
            if not _EVENT_ID_RE.match(event_id):
                continue
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    self._documents[event_id] = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                # Skip unreadable files, keep loading the rest
                logger.error("Error loading settings %s: %s", file_path, e)


def _check_event_id(event_id: str) -> None:
    if not isinstance(event_id, str) or not _EVENT_ID_RE.match(event_id):
        raise ValueError(f"Invalid event id: {event_id!r}")


# Global settings store instance
_default_store: SettingsStore | None = None


def get_settings_store(storage_path: Path | str | None = None) -> SettingsStore:
    """Get the default settings store instance.

    Args:
        storage_path: Optional storage directory (only used on first call).

    Returns:
        SettingsStore instance.
    """
    global _default_store
    if _default_store is None:
        _default_store = SettingsStore(storage_path)
    return _default_store
