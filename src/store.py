# ABOUTME: Persistent key-value stores backing the weather cache, plus entry read/write helpers.
# ABOUTME: Values are JSON strings of the form {"data": <snapshot>, "timestamp": <epoch ms>}.

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import ValidationError

from src.models import CacheEntry, WeatherSnapshot

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    """Synchronous string store with local-storage semantics."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dict-backed store, lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileStore:
    """Store kept in a single JSON object on disk, so the cache survives restarts.

    The whole file is rewritten on every set; writes go through a temporary
    file and a rename so a crash never leaves a truncated file behind.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            items = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable store file %s", self.path)
            return {}
        return items if isinstance(items, dict) else {}

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(items, ensure_ascii=False), encoding="utf-8")
        tmp.replace(self.path)


def read_entry(store: KeyValueStore, key: str) -> CacheEntry | None:
    """Return the cache entry stored under key, or None if absent or not a valid entry."""
    raw = store.get(key)
    if raw is None:
        return None
    try:
        return CacheEntry.model_validate_json(raw)
    except ValidationError:
        logger.warning("Discarding malformed cache entry under %r", key)
        return None


def write_entry(store: KeyValueStore, key: str, snapshot: WeatherSnapshot, timestamp_ms: int) -> CacheEntry:
    """Overwrite the entry under key with snapshot captured at timestamp_ms."""
    entry = CacheEntry(data=snapshot, timestamp=timestamp_ms)
    store.set(key, entry.model_dump_json())
    return entry
