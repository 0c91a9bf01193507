"""Resource limits enforced while a query runs."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional


class QueryLimitExceeded(RuntimeError):
    """Raised when a query goes beyond one of its limits."""


@dataclass(frozen=True)
class QueryLimits:
    """Limits for a single query; times are in seconds, memory in bytes."""

    max_cpu_time: float = 60.0
    max_memory: int = 100 * 1024 * 1024
    max_wall_time: float = 300.0


@dataclass
class Sandbox:
    """Tracks elapsed time and memory use of one query against its limits."""

    limits: QueryLimits = field(default_factory=QueryLimits)
    memory_used: int = 0
    _start: float = field(default_factory=time.monotonic, init=False, repr=False)

    def __init__(self, limits: Optional[QueryLimits] = None) -> None:
        self.limits = limits if limits is not None else QueryLimits()
        self.memory_used = 0
        self._start = time.monotonic()

    def check(self) -> None:
        """Raise :class:`QueryLimitExceeded` if any limit has been passed."""
        if self.elapsed() > self.limits.max_wall_time:
            raise QueryLimitExceeded("Query exceeded wall time limit")
        if self.memory_used > self.limits.max_memory:
            raise QueryLimitExceeded("Query exceeded memory limit")

    def track_memory(self, nbytes: int) -> None:
        """Record ``nbytes`` more bytes of memory in use."""
        self.memory_used += nbytes

    def elapsed(self) -> float:
        """Seconds since the sandbox was created."""
        return time.monotonic() - self._start