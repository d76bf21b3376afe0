"""In-process cache with per-entry expiration.

Expiration is checked when an entry is read; there is no background
eviction. Entries are stored as immutable records so a reader always sees
either the previous or the replacement value, never a mix of both.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A cached value and the monotonic instant it stops being valid."""

    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class TTLCache:
    """Process-wide key/value store with time-to-live per entry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._write_lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Return the value stored under ``key`` or None if absent/expired."""
        entry = self._entries.get(key)
        if entry is None:
            logger.debug("Cache miss: %s", key)
            return None

        if entry.is_expired(self._clock()):
            logger.debug("Cache entry expired: %s", key)
            self._discard(key, entry)
            return None

        logger.debug("Cache hit: %s", key)
        return entry.value

    def contains(self, key: str) -> bool:
        return self.get(key) is not None

    def set(self, key: str, value: Any, ttl: float) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds.

        Replaces any existing entry under the same key. ``None`` cannot be
        stored because ``get`` uses it to report a miss.
        """
        if value is None:
            msg = f"cannot cache None under {key!r}"
            raise ValueError(msg)
        if ttl <= 0:
            msg = f"ttl must be positive, got {ttl}"
            raise ValueError(msg)

        entry = CacheEntry(value=value, expires_at=self._clock() + ttl)
        with self._write_lock:
            self._entries[key] = entry
        logger.debug("Cache set: %s (ttl=%.1fs)", key, ttl)

    def delete(self, key: str) -> bool:
        with self._write_lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._write_lock:
            self._entries.clear()

    def _discard(self, key: str, entry: CacheEntry) -> None:
        # Only drop the entry we saw expire; a concurrent set may have
        # already replaced it.
        with self._write_lock:
            if self._entries.get(key) is entry:
                del self._entries[key]

    def __len__(self) -> int:
        now = self._clock()
        entries = list(self._entries.values())
        return sum(1 for entry in entries if not entry.is_expired(now))
