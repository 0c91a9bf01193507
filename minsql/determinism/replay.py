"""Deterministic replay of the write-ahead log."""

from __future__ import annotations

from typing import Protocol

from minsql.determinism.clock import HybridLogicalClock, LogicalTime


class WalReplayable(Protocol):
    """Anything whose write-ahead log can be replayed."""

    def wal_replay(self) -> None: ...


class ReplayEngine:
    """Replays storage under a clock frozen at a given physical time."""

    def __init__(self, frozen_time: int) -> None:
        self.clock = HybridLogicalClock.deterministic(frozen_time)

    def replay_wal(self, storage: WalReplayable) -> None:
        """Replay the write-ahead log of ``storage``."""
        storage.wal_replay()

    def current_time(self) -> LogicalTime:
        """Return the clock's current time."""
        return self.clock.now()

    def advance_time(self) -> LogicalTime:
        """Advance the clock and return the new time."""
        return self.clock.advance()