import pytest

from minsql.analytics.columnar import ColumnarStorage
from minsql.execution.rows import Tuple


def _storage(rows):
    storage = ColumnarStorage()
    for row in rows:
        storage.insert(Tuple(dict(row)))
    return storage


def test_scan_returns_inserted_values_in_order():
    ages = [30, 41, 27]
    storage = _storage({"age": age, "name": f"u{age}"} for age in ages)
    assert storage.scan_column("age", 0, len(ages)) == ages
    assert storage.scan_column("name", 0, len(ages)) == [f"u{age}" for age in ages]
    assert storage.row_count() == len(ages)


def test_scan_range_is_clamped():
    values = [1.5, 2.5, 3.5]
    storage = _storage({"x": v} for v in values)
    assert storage.scan_column("x", 0, 100) == values
    assert storage.scan_column("x", 1, 2) == values[1:2]
    assert storage.scan_column("x", 5, 2) == []


def test_null_column():
    storage = _storage([{"n": None}, {"n": None}])
    assert storage.scan_column("n", 0, 10) == [None, None]


def test_type_mismatch_raises_and_does_not_count_row():
    storage = _storage([{"a": 1}])
    with pytest.raises(TypeError):
        storage.insert(Tuple({"a": "text"}))
    assert storage.row_count() == 1


def test_bool_is_not_an_integer_column():
    storage = _storage([{"a": 1}])
    with pytest.raises(TypeError):
        storage.insert(Tuple({"a": True}))


def test_missing_column_raises():
    storage = ColumnarStorage()
    with pytest.raises(KeyError):
        storage.scan_column("missing", 0, 1)
    with pytest.raises(KeyError):
        storage.compress_column("missing")


def test_compress_integer_column():
    storage = _storage({"a": v} for v in [1, 2, 3, 4])
    assert storage.compress_column("a") == 16


def test_compress_string_column():
    storage = _storage([{"s": "ab"}, {"s": "cde"}])
    assert storage.compress_column("s") == 2