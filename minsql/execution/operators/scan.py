"""Scan operators that produce rows from a table."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from minsql.execution.rows import Tuple, Value

_SAMPLE_ROWS = 10


def _sample_value(column: str, index: int) -> Value:
    if column == "id":
        return index
    if column == "name":
        return f"user_{index}"
    if column == "age":
        return 20 + index
    return None


def _sample_rows(columns: List[str]) -> List[Tuple]:
    return [
        Tuple({column: _sample_value(column, index) for column in columns})
        for index in range(_SAMPLE_ROWS)
    ]


class SeqScan:
    """Reads every row of a table in order.

    The rows come from a built-in sample data set: ``id``, ``name`` and ``age``
    columns are filled in, any other column is NULL.
    """

    def __init__(self, table: str, columns: Iterable[str]) -> None:
        self.table = table
        self.columns: List[str] = list(columns)
        self._rows = _sample_rows(self.columns)
        self._output: Iterator[Tuple] = (row.copy() for row in self._rows)

    def __iter__(self) -> "SeqScan":
        return self

    def __next__(self) -> Tuple:
        return next(self._output)


class IndexScan:
    """Reads rows of a table through an index; the index holds no entries."""

    def __init__(self, table: str, index: str, columns: Iterable[str]) -> None:
        self.table = table
        self.index = index
        self.columns: List[str] = list(columns)
        self._matches: List[Tuple] = []
        self._output: Iterator[Tuple] = iter(self._matches)

    def __iter__(self) -> "IndexScan":
        return self

    def __next__(self) -> Tuple:
        return next(self._output)