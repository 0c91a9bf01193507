"""Join operators."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, Iterator, List

from minsql.execution.rows import Tuple, Value
from minsql.language.intent import FilterIntent


def _merge(left: Tuple, right: Tuple) -> Tuple:
    joined = left.copy()
    joined.values.update(right.values)
    return joined


def _value_key(value: Value) -> Hashable:
    return (type(value).__name__, repr(value))


class HashJoin:
    """Joins rows whose ``id`` values are equal, probing a hash table of the right side."""

    def __init__(
        self, left: Iterable[Tuple], right: Iterable[Tuple], condition: FilterIntent
    ) -> None:
        self.left: List[Tuple] = list(left)
        self.right: List[Tuple] = list(right)
        self.condition = condition
        self._table: Dict[Hashable, List[Tuple]] = {}
        for row in self.right:
            self._table.setdefault(self._join_key(row), []).append(row)
        self._output = self._generate()

    @staticmethod
    def _join_key(row: Tuple) -> Hashable:
        return _value_key(row.values["id"]) if "id" in row else ""

    def _generate(self) -> Iterator[Tuple]:
        for left_row in self.left:
            for right_row in self._table.get(self._join_key(left_row), ()):
                yield _merge(left_row, right_row)

    def __iter__(self) -> "HashJoin":
        return self

    def __next__(self) -> Tuple:
        return next(self._output)


class NestedLoopJoin:
    """Pairs every left row with every right row."""

    def __init__(
        self, left: Iterable[Tuple], right: Iterable[Tuple], condition: FilterIntent
    ) -> None:
        self.left: List[Tuple] = list(left)
        self.right: List[Tuple] = list(right)
        self.condition = condition
        self._output = (_merge(l_row, r_row) for l_row in self.left for r_row in self.right)

    def __iter__(self) -> "NestedLoopJoin":
        return self

    def __next__(self) -> Tuple:
        return next(self._output)