"""Batch-at-a-time execution over fixed-size batches of rows."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional

from minsql.execution.rows import Tuple, Value

VECTOR_SIZE = 1024
"""Maximum number of rows in one batch."""


class VectorBatch:
    """A bounded batch of rows."""

    def __init__(self) -> None:
        self._rows: List[Tuple] = []

    def add(self, row: Tuple) -> bool:
        """Append ``row``; return ``False`` if the batch was already full."""
        if self.is_full():
            return False
        self._rows.append(row)
        return True

    def is_full(self) -> bool:
        """Whether the batch holds :data:`VECTOR_SIZE` rows."""
        return len(self._rows) >= VECTOR_SIZE

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Tuple]:
        return iter(self._rows)

    def clear(self) -> None:
        """Remove all rows."""
        self._rows.clear()


def _batch_of(rows: Iterable[Tuple]) -> VectorBatch:
    batch = VectorBatch()
    for row in rows:
        if not batch.add(row):
            break
    return batch


def _same_kind(a: object, b: object, kind: type) -> bool:
    return type(a) is kind and type(b) is kind


class VectorizedExecutor:
    """Filters, projects, aggregates and joins whole batches."""

    def filter_batch(self, batch: VectorBatch, predicate: Callable[[Tuple], bool]) -> VectorBatch:
        """Return copies of the rows of ``batch`` that satisfy ``predicate``."""
        return _batch_of(row.copy() for row in batch if predicate(row))

    def project_batch(self, batch: VectorBatch, columns: Iterable[str]) -> VectorBatch:
        """Return rows holding only ``columns``; absent columns are left out."""
        wanted = list(columns)
        return _batch_of(
            Tuple({name: row.values[name] for name in wanted if name in row}) for row in batch
        )

    def aggregate_batch(self, batch: VectorBatch, column: str) -> Optional[float]:
        """Return the mean of the numeric values of ``column``, or ``None`` if there are none."""
        numbers: List[float] = [
            float(value)
            for value in (row.get(column) for row in batch)
            if isinstance(value, (int, float)) and not isinstance(value, bool)
        ]
        if not numbers:
            return None
        return sum(numbers) / len(numbers)

    def join_batches(
        self, left: VectorBatch, right: VectorBatch, left_key: str, right_key: str
    ) -> VectorBatch:
        """Equi-join two batches; the result is capped at :data:`VECTOR_SIZE` rows."""
        result = VectorBatch()
        for left_row in left:
            for right_row in right:
                if left_key not in left_row or right_key not in right_row:
                    continue
                if self._values_equal(left_row.values[left_key], right_row.values[right_key]):
                    joined = left_row.copy()
                    joined.values.update(right_row.values)
                    if not result.add(joined):
                        break
        return result

    @staticmethod
    def _values_equal(a: Value, b: Value) -> bool:
        return (
            _same_kind(a, b, int) or _same_kind(a, b, str) or _same_kind(a, b, bool)
        ) and a == b