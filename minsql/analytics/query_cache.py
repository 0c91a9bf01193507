"""Time-limited cache of query results."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from minsql.execution.rows import Tuple


@dataclass
class _Entry:
    results: List[Tuple]
    created_at: float
    access_count: int = 0


@dataclass(frozen=True)
class CacheStats:
    """Summary of the cache's contents."""

    entries: int
    total_accesses: int
    max_size: int


def _copy_rows(rows: Sequence[Tuple]) -> List[Tuple]:
    return [row.copy() for row in rows]


class QueryCache:
    """Caches query results for ``ttl`` seconds, holding at most ``max_size`` queries."""

    def __init__(
        self, max_size: int, ttl: float, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self.max_size = max_size
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, _Entry] = {}
        self._lock = asyncio.Lock()

    async def get(self, query: str) -> Optional[List[Tuple]]:
        """Return the cached results of ``query``, or ``None`` if absent or expired."""
        async with self._lock:
            entry = self._entries.get(query)
            if entry is None:
                return None
            age = self._clock() - entry.created_at
            if age < 0:
                return None
            if age < self.ttl:
                entry.access_count += 1
                return _copy_rows(entry.results)
            del self._entries[query]
            return None

    async def put(self, query: str, results: Sequence[Tuple]) -> None:
        """Cache ``results`` for ``query``, evicting the least used entry when full."""
        async with self._lock:
            if len(self._entries) >= self.max_size:
                self._evict_least_used()
            self._entries[query] = _Entry(_copy_rows(results), self._clock())

    async def invalidate(self, pattern: str) -> None:
        """Drop every entry whose query text contains ``pattern``."""
        async with self._lock:
            self._entries = {k: v for k, v in self._entries.items() if pattern not in k}

    async def clear(self) -> None:
        """Drop every entry."""
        async with self._lock:
            self._entries.clear()

    async def stats(self) -> CacheStats:
        """Return counts of entries and accesses."""
        async with self._lock:
            return CacheStats(
                entries=len(self._entries),
                total_accesses=sum(e.access_count for e in self._entries.values()),
                max_size=self.max_size,
            )

    def _evict_least_used(self) -> None:
        if self._entries:
            victim = min(self._entries, key=lambda k: self._entries[k].access_count)
            del self._entries[victim]

    async def _purge_expired(self) -> None:
        async with self._lock:
            now = self._clock()
            self._entries = {
                k: v for k, v in self._entries.items() if 0 <= now - v.created_at < self.ttl
            }

    async def cleanup_loop(self, interval: float = 60.0) -> None:
        """Remove expired entries every ``interval`` seconds, until cancelled."""
        while True:
            await self._purge_expired()
            await asyncio.sleep(interval)