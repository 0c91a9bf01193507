"""Operators that change the contents of a table."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from minsql.execution.rows import Value
from minsql.language.intent import AssignmentIntent


class Insert:
    """Inserts rows of constant values into a table."""

    def __init__(
        self, table: str, columns: Iterable[str], values: Iterable[Iterable[Value]]
    ) -> None:
        self.table = table
        self.columns: List[str] = list(columns)
        self.values: List[Tuple[Value, ...]] = [tuple(row) for row in values]

    def execute(self) -> int:
        """Return the number of rows inserted."""
        return len(self.values)


class Update:
    """Applies assignments to rows of a table."""

    def __init__(self, table: str, assignments: Iterable[AssignmentIntent]) -> None:
        self.table = table
        self.assignments: List[AssignmentIntent] = list(assignments)

    def execute(self) -> int:
        """Return the number of rows updated."""
        return 1


class Delete:
    """Removes rows from a table."""

    def __init__(self, table: str) -> None:
        self.table = table

    def execute(self) -> int:
        """Return the number of rows deleted."""
        return 1