"""Named, stored query results that are refreshed periodically."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from minsql.execution.rows import Tuple
from minsql.language.syntax import Statement

logger = logging.getLogger(__name__)


class ViewNotFoundError(LookupError):
    """Raised when a named materialized view does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Materialized view not found: {name}")
        self.name = name


@dataclass
class MaterializedView:
    """A view: its defining query, its stored rows and when it was last refreshed."""

    name: str
    query: Statement
    data: List[Tuple] = field(default_factory=list)
    last_refresh: float = 0.0


class MaterializedViewManager:
    """Keeps materialized views by name."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._views: Dict[str, MaterializedView] = {}
        self._lock = asyncio.Lock()

    async def create_view(self, name: str, query: Statement) -> None:
        """Create, or replace, the view ``name`` defined by ``query``."""
        async with self._lock:
            self._views[name] = MaterializedView(name, query, [], self._clock())

    async def refresh_view(self, name: str) -> None:
        """Mark the view ``name`` as refreshed now."""
        async with self._lock:
            self._lookup(name).last_refresh = self._clock()

    async def query_view(self, name: str) -> List[Tuple]:
        """Return copies of the rows stored in the view ``name``."""
        async with self._lock:
            return [row.copy() for row in self._lookup(name).data]

    async def drop_view(self, name: str) -> None:
        """Remove the view ``name``."""
        async with self._lock:
            if self._views.pop(name, None) is None:
                raise ViewNotFoundError(name)

    async def list_views(self) -> List[str]:
        """Return the names of all views."""
        async with self._lock:
            return list(self._views)

    async def get(self, name: str) -> MaterializedView:
        """Return the view ``name``."""
        async with self._lock:
            return self._lookup(name)

    def _lookup(self, name: str) -> MaterializedView:
        try:
            return self._views[name]
        except KeyError:
            raise ViewNotFoundError(name) from None

    async def auto_refresh_loop(self, interval: float = 300.0) -> None:
        """Refresh every view each ``interval`` seconds, until cancelled."""
        while True:
            for name in await self.list_views():
                try:
                    await self.refresh_view(name)
                except ViewNotFoundError as exc:
                    logger.error("Failed to refresh view %s: %s", name, exc)
            await asyncio.sleep(interval)