import json
import logging
from typing import Any

from projecthub.errors import StorageError

logger = logging.getLogger(__name__)


class StoreAdapter:
    """JSON records on top of a text key-value backend.

    Reads fail open: anything missing, unreadable or malformed yields the
    caller's default. Writes are best effort: failures are logged and
    swallowed, the in-memory state stays authoritative for the session.
    """

    def __init__(self, storage, prefix: str = "projecthub_"):
        self.storage = storage
        self.prefix = prefix

    def key(self, name: str) -> str:
        return f"{self.prefix}{name}"

    def load(self, name: str, default: Any = None) -> Any:
        key = self.key(name)
        try:
            raw = self.storage.get_item(key)
        except StorageError as exc:
            logger.warning("Failed to read %s from storage: %s", key, exc)
            return default
        if not raw:
            return default
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed record under %s", key)
            return default

    def save(self, name: str, value: Any) -> None:
        key = self.key(name)
        try:
            self.storage.set_item(key, json.dumps(value))
        except (StorageError, TypeError, ValueError) as exc:
            logger.error("Failed to save %s to storage: %s", key, exc)

    def remove(self, name: str) -> None:
        key = self.key(name)
        try:
            self.storage.remove_item(key)
        except StorageError as exc:
            logger.error("Failed to remove %s from storage: %s", key, exc)

    def close(self) -> None:
        self.storage.close()
