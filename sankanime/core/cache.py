"""Versioned, time-boxed persistent cache for the home aggregate."""

import json
import math
import time
from typing import Any, Callable, Dict, Optional

from loguru import logger

from .errors import CacheCorruptionError
from .storage import Storage
from ..models.types import CacheEntry

# Constants
CACHE_VERSION = "1.0"
CACHE_TTL = 24 * 60 * 60  # 24 h
KEY_PREFIX = "homeInfoCache_v"


def cache_key(version: str = CACHE_VERSION) -> str:
    return f"{KEY_PREFIX}{version}"


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


class HomeCache:
    """Single-record cache stored as JSON `{"data": ..., "timestamp": <epoch ms>}`.

    Bumping `version` moves the record to a new key; records under older keys
    are ignored.
    """

    def __init__(
        self,
        storage: Storage,
        version: str = CACHE_VERSION,
        ttl: float = CACHE_TTL,
        clock: Callable[[], float] = time.time,
    ):
        self.storage = storage
        self.key = cache_key(version)
        self.ttl = ttl
        self._clock = clock
        self.hits = 0
        self.misses = 0

    def now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _decode(self, raw: str) -> CacheEntry:
        try:
            entry = json.loads(raw, parse_constant=_reject_constant)
        except ValueError as e:
            raise CacheCorruptionError(f"undecodable record under {self.key}") from e
        if not isinstance(entry, dict) or not entry.get("timestamp") or not entry.get("data"):
            raise CacheCorruptionError(f"record under {self.key} lacks data/timestamp")
        ts = entry["timestamp"]
        if isinstance(ts, bool) or not isinstance(ts, (int, float)) or not math.isfinite(ts):
            raise CacheCorruptionError(f"record under {self.key} has a non-numeric timestamp")
        return entry

    def read(self) -> Optional[Any]:
        """Return cached data if fresh, None on miss or expiry.

        Raises CacheCorruptionError when a stored record cannot be decoded.
        """
        raw = self.storage.get_item(self.key)
        if raw is None:
            self.misses += 1
            return None

        entry = self._decode(raw)
        age_ms = self.now_ms() - entry["timestamp"]
        if age_ms >= self.ttl * 1000:
            logger.debug("Home cache expired ({:.0f}s old)", age_ms / 1000)
            self.misses += 1
            return None

        self.hits += 1
        return entry["data"]

    def write(self, data: Any) -> None:
        if data is None:
            raise ValueError("refusing to cache a null payload")
        record = {"data": data, "timestamp": self.now_ms()}
        self.storage.set_item(self.key, json.dumps(record, ensure_ascii=False))

    def evict(self) -> None:
        self.storage.remove_item(self.key)

    def info(self) -> Dict[str, Any]:
        """Cache statistics."""
        stored_at = None
        raw = self.storage.get_item(self.key)
        if raw is not None:
            try:
                stored_at = self._decode(raw)["timestamp"]
            except CacheCorruptionError:
                stored_at = None
        return {
            "key": self.key,
            "hits": self.hits,
            "misses": self.misses,
            "stored": stored_at is not None,
            "ageSec": (self.now_ms() - stored_at) / 1000 if stored_at is not None else None,
            "ttlSec": self.ttl,
        }

    def clear(self) -> int:
        """Remove the current record and any orphaned older versions; return how many went."""
        keys = [k for k in self.storage.keys() if k.startswith(KEY_PREFIX)]
        for k in keys:
            self.storage.remove_item(k)
        return len(keys)
