"""Mini README: Durable key-value storage backends for the ledger.

Structure:
    * KeyValueStorage - abstract interface holding text values under keys.
    * JsonFileStorage - one ``<key>.json`` file per key inside a directory.
    * InMemoryStorage - dictionary backend for tests and throwaway sessions.

The ledger serialises itself to text and hands it to a backend, so the
backends never need to understand the record layout.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class KeyValueStorage(ABC):
    """Base interface for durable text storage."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value or ``None`` when the key was never written."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""


class JsonFileStorage(KeyValueStorage):
    """Persist each key as a UTF-8 JSON file within ``directory``."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)
        LOGGER.debug("Ledger storage directory set to %s", self.directory)

    def path_for(self, key: str) -> Path:
        """Return the file backing ``key``."""

        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        temp_path = path.with_suffix(".json.tmp")
        try:
            temp_path.write_text(value, encoding="utf-8")
            os.replace(temp_path, path)
        finally:
            temp_path.unlink(missing_ok=True)
        LOGGER.debug("Wrote %s bytes to %s", len(value), path)


class InMemoryStorage(KeyValueStorage):
    """Dictionary-backed storage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes += 1
