import pytest

from minsql.execution.operators.aggregate import HashAggregate
from minsql.execution.rows import Tuple
from minsql.language.intent import AggregateIntent, ColumnRef

ARG = ColumnRef("x")


def _rows(n):
    return [Tuple({"x": i}) for i in range(n)]


def test_empty_input_yields_nothing():
    assert list(HashAggregate([], [], [AggregateIntent("count", ARG)])) == []


def test_single_group_values():
    rows = _rows(3)
    aggregates = [
        AggregateIntent("count", ARG, "n"),
        AggregateIntent("SUM", ARG),
        AggregateIntent("avg", ARG),
        AggregateIntent("min", ARG),
        AggregateIntent("max", ARG),
        AggregateIntent("median", ARG),
    ]
    (result,) = list(HashAggregate(rows, [], aggregates))
    assert result.values == {
        "n": len(rows),
        "SUM": float(len(rows)),
        "avg": 1.0,
        "min": 1.0,
        "max": 1.0,
        "median": None,
    }


def test_group_by_is_a_single_group():
    rows = _rows(5)
    results = list(HashAggregate(rows, [ColumnRef("x")], [AggregateIntent("count", ARG)]))
    assert [r.get("count") for r in results] == [len(rows)]


def test_exhausted_operator_keeps_stopping():
    operator = HashAggregate(_rows(2), [], [AggregateIntent("count", ARG)])
    assert next(operator).get("count") == 2
    with pytest.raises(StopIteration):
        next(operator)
    with pytest.raises(StopIteration):
        next(operator)