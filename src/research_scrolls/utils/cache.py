"""
In-memory response cache shared by the source adapters.

Entries are keyed by "<source>:<query>:<limit>" and expire after a fixed TTL.
A hit also requires the stored query to equal the caller's query tag, which
guards against two different queries concatenating to the same key.
When the cache grows past its maximum size the oldest entries (by creation
time, not by last access) are evicted.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from pydantic import BaseModel

from research_scrolls.constants import CACHE_MAX_ENTRIES, CACHE_TTL
from research_scrolls.models.model_paper import Paper

logger = logging.getLogger("research_scrolls.cache")


class CacheEntry(BaseModel):
    """A cached adapter result."""

    data: list[Paper]
    timestamp: float  # cache clock reading at creation
    query: str  # exact query string that produced `data`


class ResponseCache:
    """
    Bounded, time-expiring key -> records store.

    Mutation of the underlying dict is serialized with an asyncio lock. The
    lock is released while the producer runs, so two concurrent misses for
    the same key may both fetch; the later write wins.
    """

    def __init__(
        self,
        ttl_seconds: float = CACHE_TTL,
        max_entries: int = CACHE_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    async def get_or_fetch(
        self,
        key: str,
        producer: Callable[[], Awaitable[list[Paper]]],
        query_tag: str,
    ) -> list[Paper]:
        """Return cached records for `key`, or await `producer` and cache its result.

        Exceptions raised by `producer` propagate and nothing is stored.
        """
        now = self._clock()
        async with self._lock:
            entry = self._entries.get(key)
            if (
                entry is not None
                and now - entry.timestamp < self.ttl
                and entry.query == query_tag
            ):
                logger.debug("Cache hit for %s", key)
                return list(entry.data)

        logger.debug("Cache miss for %s, fetching", key)
        data = await producer()

        async with self._lock:
            self._entries[key] = CacheEntry(data=data, timestamp=now, query=query_tag)
            self._trim()

        return list(data)

    def clear_cache(self, pattern: str | None = None) -> None:
        """Drop every entry, or only those whose key contains `pattern`."""
        if not pattern:
            self._entries.clear()
            return
        for key in [k for k in self._entries if pattern in k]:
            del self._entries[key]

    def _trim(self) -> None:
        if len(self._entries) <= self.max_entries:
            return
        oldest_first = sorted(self._entries.items(), key=lambda kv: kv[1].timestamp)
        for key, _ in oldest_first[: len(oldest_first) - self.max_entries]:
            logger.debug("Evicting cache entry %s", key)
            del self._entries[key]
