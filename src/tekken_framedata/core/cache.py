"""Time-bounded cache for upstream payloads.

Entries expire on read; nothing is evicted otherwise. There is no
single-flight: concurrent misses on one key may each run the fetcher, which
is acceptable because upstream fetches are idempotent.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 10 * 60


@dataclass
class CacheEntry:
    payload: Any
    expires_at: float


class TTLCache:
    """Expiring key/value store with an injectable clock (seconds, monotonic)."""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.monotonic
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    async def get_or_fetch(
        self,
        key: str,
        fetcher: Callable[[], Awaitable[Any]],
        ttl: float = DEFAULT_TTL_SECONDS,
    ) -> Any:
        """Return the live entry for ``key``, or await ``fetcher`` and store its result.

        Fetcher exceptions propagate and leave the cache untouched.
        """
        entry = self._entries.get(key)
        if entry is not None and self._clock() < entry.expires_at:
            logger.debug("Cache hit: %s", key)
            return entry.payload

        logger.debug("Cache %s: %s", "expired" if entry else "miss", key)
        payload = await fetcher()
        self._entries[key] = CacheEntry(payload=payload, expires_at=self._clock() + ttl)
        return payload
