"""Hash aggregation operator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from minsql.execution.rows import Tuple, Value
from minsql.language.intent import AggregateIntent, ExpressionIntent


@dataclass
class _AggregateState:
    count: int = 0
    total: float = 0.0
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    def accumulate(self, row: Tuple) -> None:
        self.count += 1
        self.total += 1.0
        if self.minimum is None:
            self.minimum = 1.0
        if self.maximum is None:
            self.maximum = 1.0

    def finalize(self, function: str) -> Value:
        name = function.lower()
        if name == "count":
            return self.count
        if name == "sum":
            return self.total
        if name == "avg":
            return self.total / self.count if self.count > 0 else None
        if name == "min":
            return self.minimum
        if name == "max":
            return self.maximum
        return None


class HashAggregate:
    """Groups input rows and yields one row of aggregate values per group."""

    def __init__(
        self,
        rows: Iterable[Tuple],
        group_by: Iterable[ExpressionIntent],
        aggregates: Iterable[AggregateIntent],
    ) -> None:
        self.rows: List[Tuple] = list(rows)
        self.group_by = tuple(group_by)
        self.aggregates = tuple(aggregates)
        self._groups: Dict[str, _AggregateState] = {}
        for row in self.rows:
            key = self._group_key(row)
            self._groups.setdefault(key, _AggregateState()).accumulate(row)
        self._results: Optional[Iterator[Tuple]] = None

    def _group_key(self, row: Tuple) -> str:
        return "default_group"

    def _finalize(self) -> Iterator[Tuple]:
        results = []
        for state in self._groups.values():
            out = Tuple()
            for agg in self.aggregates:
                out.insert(agg.alias if agg.alias is not None else agg.function,
                           state.finalize(agg.function))
            results.append(out)
        return iter(results)

    def __iter__(self) -> "HashAggregate":
        return self

    def __next__(self) -> Tuple:
        if self._results is None:
            self._results = self._finalize()
        return next(self._results)