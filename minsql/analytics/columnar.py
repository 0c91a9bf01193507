"""Column-oriented storage of rows, one typed list per column."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from minsql.execution.rows import Tuple, Value


def _kind(value: Value) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "str"
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


@dataclass
class _Column:
    kind: str
    values: List[Value] = field(default_factory=list)

    def estimated_size(self) -> int:
        if self.kind in ("int", "float"):
            return len(self.values) * 8
        if self.kind == "str":
            return sum(len(text.encode("utf-8")) for text in self.values)
        return len(self.values)


class ColumnarStorage:
    """Stores rows column by column; each column keeps the type of its first value."""

    def __init__(self) -> None:
        self._columns: Dict[str, _Column] = {}
        self._row_count = 0

    def insert(self, row: Tuple) -> None:
        """Append the values of ``row`` to their columns.

        Raises :class:`TypeError` when a value does not match its column's type.
        """
        for name, value in row.values.items():
            kind = _kind(value)
            column = self._columns.setdefault(name, _Column(kind))
            if column.kind != kind:
                raise TypeError("Type mismatch in columnar insert")
            column.values.append(value)
        self._row_count += 1

    def _column(self, name: str) -> _Column:
        try:
            return self._columns[name]
        except KeyError:
            raise KeyError(f"Column not found: {name}") from None

    def scan_column(self, column: str, start: int, end: int) -> List[Value]:
        """Return the values of ``column`` from ``start`` up to ``end``, clamped to its length."""
        values = self._column(column).values
        return list(values[start:min(end, len(values))])

    def compress_column(self, column: str) -> int:
        """Return the estimated compressed size of ``column`` in bytes."""
        return self._column(column).estimated_size() // 2

    def row_count(self) -> int:
        """Number of rows inserted."""
        return self._row_count