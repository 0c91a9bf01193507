from minsql.analytics.vectorized import VECTOR_SIZE, VectorBatch, VectorizedExecutor
from minsql.execution.rows import Tuple


def _batch(rows):
    batch = VectorBatch()
    for row in rows:
        assert batch.add(Tuple(dict(row)))
    return batch


def test_batch_fills_up():
    batch = VectorBatch()
    for i in range(VECTOR_SIZE):
        assert batch.add(Tuple({"i": i}))
    assert batch.is_full()
    assert batch.add(Tuple({"i": -1})) is False
    assert len(batch) == VECTOR_SIZE
    batch.clear()
    assert len(batch) == 0 and not batch.is_full()


def test_filter_batch():
    batch = _batch({"x": i} for i in range(10))
    result = VectorizedExecutor().filter_batch(batch, lambda row: row.get("x") % 2 == 0)
    assert [row.get("x") for row in result] == list(range(0, 10, 2))


def test_project_batch_skips_missing_columns():
    batch = _batch([{"a": 1, "b": "x"}, {"b": "y", "c": True}])
    result = VectorizedExecutor().project_batch(batch, ["a", "b"])
    assert [row.values for row in result] == [{"a": 1, "b": "x"}, {"b": "y"}]


def test_aggregate_batch_mean_ignores_non_numeric():
    batch = _batch([{"v": 1}, {"v": 2.0}, {"v": 3}, {"v": "text"}, {"v": True}, {"w": 9}])
    assert VectorizedExecutor().aggregate_batch(batch, "v") == 2.0


def test_aggregate_batch_without_numbers_is_null():
    batch = _batch([{"v": "text"}, {"v": None}])
    assert VectorizedExecutor().aggregate_batch(batch, "v") is None


def test_join_batches_matches_equal_keys():
    left = _batch([{"id": 1, "name": "a"}, {"id": 2, "name": "b"}])
    right = _batch([{"uid": 2, "score": 7}, {"uid": 3, "score": 8}])
    result = list(VectorizedExecutor().join_batches(left, right, "id", "uid"))
    assert [row.values for row in result] == [{"id": 2, "name": "b", "uid": 2, "score": 7}]


def test_join_batches_floats_and_mixed_types_never_match():
    left = _batch([{"k": 1.0}, {"k": 1}, {"k": None}])
    right = _batch([{"k": 1.0}, {"k": True}, {"k": None}])
    assert len(VectorizedExecutor().join_batches(left, right, "k", "k")) == 0


def test_join_batches_right_values_override():
    left = _batch([{"id": 1, "v": "left"}])
    right = _batch([{"id": 1, "v": "right"}])
    (row,) = VectorizedExecutor().join_batches(left, right, "id", "id")
    assert row.get("v") == "right"


def test_join_batches_is_capped():
    left = _batch({"k": 0} for _ in range(40))
    right = _batch({"k": 0} for _ in range(40))
    result = VectorizedExecutor().join_batches(left, right, "k", "k")
    assert len(result) == VECTOR_SIZE