"""Hybrid logical clock with a realtime and a frozen, deterministic mode."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, order=True)
class LogicalTime:
    """A logical counter paired with a physical time in microseconds."""

    logical: int
    physical: int

    @classmethod
    def zero(cls) -> "LogicalTime":
        """The earliest possible time."""
        return cls(0, 0)


class ClockMode(Enum):
    """Where the physical component of the clock comes from."""

    REALTIME = "realtime"
    DETERMINISTIC = "deterministic"


class HybridLogicalClock:
    """Issues strictly increasing logical timestamps."""

    def __init__(self, mode: ClockMode = ClockMode.REALTIME, frozen_physical: int = 0) -> None:
        self.mode = mode
        self.frozen_physical = frozen_physical
        self._counter = 0
        self._lock = threading.Lock()

    @classmethod
    def realtime(cls) -> "HybridLogicalClock":
        """A clock whose physical part follows the system clock."""
        return cls(ClockMode.REALTIME)

    @classmethod
    def deterministic(cls, frozen_physical: int) -> "HybridLogicalClock":
        """A clock whose physical part is fixed at ``frozen_physical``."""
        return cls(ClockMode.DETERMINISTIC, frozen_physical)

    def now(self) -> LogicalTime:
        """Return the current time and advance the logical counter by one."""
        if self.mode is ClockMode.REALTIME:
            physical = time.time_ns() // 1000
        else:
            physical = self.frozen_physical
        with self._lock:
            logical = self._counter
            self._counter += 1
        return LogicalTime(logical, physical)

    def advance(self) -> LogicalTime:
        """Same as :meth:`now`."""
        return self.now()

    def advance_by(self, delta: int) -> None:
        """Skip the logical counter forward by ``delta``."""
        if delta < 0:
            raise ValueError("delta must not be negative")
        with self._lock:
            self._counter += delta