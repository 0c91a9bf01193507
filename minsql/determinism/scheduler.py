"""Scheduler that runs tasks strictly in submission order."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Optional


@dataclass(frozen=True)
class Task:
    """A unit of work with its id and priority."""

    id: int
    priority: int
    work: Callable[[], None]


class DeterministicScheduler:
    """Runs scheduled tasks one at a time in ascending id order."""

    def __init__(self) -> None:
        self._ready: Deque[Task] = deque()
        self._next_id = 0

    async def schedule(self, priority: int, work: Callable[[], None]) -> int:
        """Queue ``work`` and return the id assigned to it."""
        if not 0 <= priority <= 255:
            raise ValueError("priority must be between 0 and 255")
        task_id = self._next_id
        self._next_id += 1
        self._ready.append(Task(task_id, priority, work))
        return task_id

    async def execute_next(self) -> Optional[int]:
        """Run the task with the lowest id; return its id, or ``None`` if idle."""
        if not self._ready:
            return None
        task = self._ready.popleft()
        task.work()
        return task.id

    async def is_empty(self) -> bool:
        """Return whether no task is waiting."""
        return not self._ready