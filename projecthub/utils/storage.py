"""Key-value storage backends.

Every backend stores plain text under a string key, the way browser local
storage does. Failures are raised as ``StorageError`` and it is up to the
``StoreAdapter`` to decide what to do with them.
"""

import logging
import os
import tempfile
from typing import Dict, Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from projecthub.errors import StorageError

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Process-local storage, used by the tests and by ``STORAGE_BACKEND=memory``."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)

    def close(self) -> None:
        pass


class FileStorage:
    """One ``<key>.json`` file per record inside ``directory``."""

    def __init__(self, directory: str):
        self.directory = directory

    def _path(self, key: str) -> str:
        return os.path.join(self.directory, f"{key}.json")

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Could not read {path}: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            os.makedirs(self.directory, exist_ok=True)
            # Write to a sibling temp file first so a crash never leaves half a record.
            fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp_path, path)
        except OSError as exc:
            raise StorageError(f"Could not write {path}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        try:
            os.remove(self._path(key))
        except FileNotFoundError:
            pass
        except OSError as exc:
            raise StorageError(f"Could not remove {key}: {exc}") from exc

    def close(self) -> None:
        pass


class MongoStorage:
    """Records kept as ``{"_id": key, "value": text}`` documents in one collection."""

    def __init__(self, collection, client: Optional[MongoClient] = None):
        self.collection = collection
        self._client = client

    @classmethod
    def from_uri(cls, uri: str, db_name: str, collection_name: str) -> "MongoStorage":
        client = MongoClient(uri, serverSelectionTimeoutMS=2000)
        return cls(client[db_name][collection_name], client=client)

    def get_item(self, key: str) -> Optional[str]:
        try:
            doc = self.collection.find_one({"_id": key})
        except PyMongoError as exc:
            raise StorageError(f"MongoDB read failed for {key}: {exc}") from exc
        if doc is None:
            return None
        return doc.get("value")

    def set_item(self, key: str, value: str) -> None:
        try:
            self.collection.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)
        except PyMongoError as exc:
            raise StorageError(f"MongoDB write failed for {key}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        try:
            self.collection.delete_one({"_id": key})
        except PyMongoError as exc:
            raise StorageError(f"MongoDB delete failed for {key}: {exc}") from exc

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


def storage_from_config(config) -> object:
    """Build the backend named by ``STORAGE_BACKEND`` (file, memory or mongo)."""
    backend = (config.get("STORAGE_BACKEND") or "file").lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "mongo":
        logger.info("Using MongoDB storage (%s)", config.get("MONGO_DB_NAME"))
        return MongoStorage.from_uri(
            config["MONGO_URI"], config["MONGO_DB_NAME"], config["MONGO_COLLECTION"]
        )
    if backend == "file":
        return FileStorage(config["STORAGE_PATH"])
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")
