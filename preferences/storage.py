"""
Key-value storage backends for preferences.

Backends never raise for I/O trouble. Every call returns a StorageResult,
and callers check `is_available()` before reading.
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class StorageResult:
    """Outcome of a storage call: a value on success, an error otherwise."""
    ok: bool
    value: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Optional[str] = None) -> "StorageResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "StorageResult":
        return cls(ok=False, error=error)


class KeyValueStorage(ABC):
    """Interface for a persistent string key-value store."""

    @abstractmethod
    def is_available(self) -> bool:
        """True if the medium can be read right now."""

    @abstractmethod
    def get(self, key: str) -> StorageResult:
        """Read a key. A missing key is a success with value None."""

    @abstractmethod
    def set(self, key: str, value: str) -> StorageResult:
        """Write a key, keeping the others."""


class MemoryStorage(KeyValueStorage):
    """
    In-process storage.

    Pass available=False to behave like a medium that can't be reached.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None, available: bool = True):
        self.values: Dict[str, str] = dict(values or {})
        self.available = available

    def is_available(self) -> bool:
        return self.available

    def get(self, key: str) -> StorageResult:
        if not self.available:
            return StorageResult.failure("storage unavailable")
        return StorageResult.success(self.values.get(key))

    def set(self, key: str, value: str) -> StorageResult:
        if not self.available:
            return StorageResult.failure("storage unavailable")
        self.values[key] = value
        return StorageResult.success(value)


class JsonFileStorage(KeyValueStorage):
    """
    Storage backed by a single JSON object file.

    A missing file reads as an empty store, and reading never touches the
    disk beyond the file itself. Writes create the parent directory, keep
    the other keys and go through a temporary file that replaces the
    original.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def is_available(self) -> bool:
        """
        Check that the file can be read.

        A file that doesn't exist yet counts as readable (and empty) unless
        something other than a directory sits where its parent should be.
        """
        try:
            if os.path.lexists(self.path):
                return os.path.isfile(self.path) and os.access(self.path, os.R_OK)
            parent = self.path.parent
            return not os.path.lexists(parent) or os.path.isdir(parent)
        except (OSError, ValueError):
            return False

    def is_writable(self) -> bool:
        """
        Check that the file can be written.

        Creates the parent directory if needed.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if os.path.lexists(self.path):
                return os.path.isfile(self.path) and os.access(self.path, os.W_OK)
            return os.access(self.path.parent, os.W_OK)
        except (OSError, ValueError):
            return False

    def _read_all(self) -> Dict[str, object]:
        if not os.path.isfile(self.path):
            return {}
        payload = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return payload

    def get(self, key: str) -> StorageResult:
        if not self.is_available():
            return StorageResult.failure(f"{self.path} is not readable")

        try:
            payload = self._read_all()
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError
            return StorageResult.failure(f"Failed to read {self.path}: {exc}")

        value = payload.get(key)
        if value is not None and not isinstance(value, str):
            return StorageResult.failure(f"Value for {key!r} is not a string")
        return StorageResult.success(value)

    def set(self, key: str, value: str) -> StorageResult:
        if not self.is_writable():
            return StorageResult.failure(f"{self.path} is not writable")

        try:
            payload = self._read_all()
        except (OSError, ValueError):
            # Unreadable contents get overwritten rather than blocking the write
            payload = {}
        payload[key] = value

        try:
            tmp_path = self.path.with_suffix(f"{self.path.suffix}.tmp")
            tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as exc:
            return StorageResult.failure(f"Failed to write {self.path}: {exc}")

        return StorageResult.success(value)
