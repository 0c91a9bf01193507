import pytest

from minsql.execution.rows import Tuple, as_bool, as_float, as_int, as_str, is_null


def test_insert_then_get_returns_value():
    row = Tuple()
    row.insert("name", "alice")
    row.insert("age", 30)
    assert row.get("name") == "alice"
    assert row.get("age") == 30


def test_insert_replaces_existing_value():
    row = Tuple()
    row.insert("age", 30)
    row.insert("age", 31)
    assert row.get("age") == 31
    assert row.columns() == ["age"]


def test_get_missing_column_is_none():
    row = Tuple({"id": 1})
    assert row.get("missing") is None
    assert "missing" not in row
    assert "id" in row


def test_columns_lists_every_inserted_name():
    row = Tuple()
    for name in ("a", "b", "c"):
        row.insert(name, None)
    assert sorted(row.columns()) == ["a", "b", "c"]
    assert len(row) == 3


def test_copy_is_independent():
    row = Tuple({"id": 1})
    clone = row.copy()
    clone.insert("id", 2)
    assert row.get("id") == 1
    assert clone.get("id") == 2


@pytest.mark.parametrize("value", [7, -3, 0])
def test_as_int_accepts_integers(value):
    assert as_int(value) == value


@pytest.mark.parametrize("value", [True, 1.5, "7", None])
def test_as_int_rejects_other_values(value):
    assert as_int(value) is None


def test_as_float_widens_integers():
    result = as_float(4)
    assert result == 4.0
    assert isinstance(result, float)
    assert as_float(2.5) == 2.5


@pytest.mark.parametrize("value", [False, "2.5", None])
def test_as_float_rejects_non_numbers(value):
    assert as_float(value) is None


def test_as_str_and_as_bool():
    assert as_str("hello") == "hello"
    assert as_str(1) is None
    assert as_bool(True) is True
    assert as_bool(1) is None


def test_is_null():
    assert is_null(None) is True
    assert is_null(0) is False
    assert is_null("") is False