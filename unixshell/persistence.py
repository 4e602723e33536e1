"""Checkpointing of shell state into an external key-value store."""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Protocol

from unixshell.filesystem import DirectoryNode, FileSystemError, tree_from_json, tree_to_json, walk

DEFAULT_PREFIX = "unixshell"

logger = logging.getLogger("unixshell.persistence")


class PersistenceError(RuntimeError):
    """Raised when the backing store cannot be written."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class MemoryStore:
    """Dictionary-backed store; share one instance to carry state across sessions."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._data


class JsonFileStore:
    """Keep every key in a single JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = threading.RLock()
        self._data: Optional[Dict[str, str]] = None

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    def _load(self) -> Dict[str, str]:
        if self._data is not None:
            return self._data
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            payload = {}
        except (OSError, json.JSONDecodeError):
            logger.warning("Ignoring unreadable state file %s", self._path)
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        self._data = {str(key): str(value) for key, value in payload.items()}
        return self._data

    def _write(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as handle:
                json.dump(self._data, handle, ensure_ascii=False, indent=2)
                handle.write("\n")
        except OSError as exc:
            raise PersistenceError(str(exc)) from exc

    # ------------------------------------------------------------------
    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._load()[key] = value
            self._write()

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._load()
            if key in data:
                del data[key]
                self._write()


@dataclass(frozen=True)
class PersistenceOptions:
    enabled: bool = True
    prefix: str = DEFAULT_PREFIX


@dataclass
class LoadedState:
    root: DirectoryNode
    current_user: str
    current_path: str


class ShellPersistence:
    """Read and write the ``{prefix}_*`` checkpoint keys."""

    def __init__(self, store: KeyValueStore, prefix: str = DEFAULT_PREFIX) -> None:
        self._store = store
        self.prefix = prefix or DEFAULT_PREFIX

    @property
    def filesystem_key(self) -> str:
        return f"{self.prefix}_filesystem"

    @property
    def user_key(self) -> str:
        return f"{self.prefix}_current_user"

    @property
    def path_key(self) -> str:
        return f"{self.prefix}_current_path"

    def load(self) -> Optional[LoadedState]:
        try:
            saved_fs = self._store.get(self.filesystem_key)
            saved_user = self._store.get(self.user_key)
            saved_path = self._store.get(self.path_key)
        except Exception as exc:
            logger.warning("Could not read saved shell state: %s", exc)
            return None
        if not saved_fs or not saved_user or not saved_path:
            return None

        try:
            root = tree_from_json(json.loads(saved_fs))
        except json.JSONDecodeError as exc:
            logger.warning("Discarding saved filesystem with invalid JSON: %s", exc)
            return None
        except FileSystemError as exc:
            logger.warning("Discarding saved filesystem: %s", exc)
            return None

        if walk(root, saved_path) is None:
            logger.warning("Discarding saved state; path %s does not exist", saved_path)
            return None
        return LoadedState(root=root, current_user=saved_user, current_path=saved_path)

    def save(self, root: DirectoryNode, current_user: str, current_path: str) -> None:
        try:
            self._store.set(self.filesystem_key, json.dumps(tree_to_json(root), ensure_ascii=False))
            self._store.set(self.user_key, current_user)
            self._store.set(self.path_key, current_path)
        except Exception as exc:
            logger.error("Failed to checkpoint shell state: %s", exc)

    def clear(self) -> None:
        try:
            for key in (self.filesystem_key, self.user_key, self.path_key):
                self._store.remove(key)
        except Exception as exc:
            logger.error("Failed to clear saved shell state: %s", exc)


__all__ = [
    "DEFAULT_PREFIX",
    "JsonFileStore",
    "KeyValueStore",
    "LoadedState",
    "MemoryStore",
    "PersistenceError",
    "PersistenceOptions",
    "ShellPersistence",
]
