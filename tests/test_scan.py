from minsql.execution.operators.scan import IndexScan, SeqScan


def test_seq_scan_yields_ten_rows():
    rows = list(SeqScan("users", ["id"]))
    assert len(rows) == 10


def test_seq_scan_first_row_values():
    first = next(SeqScan("users", ["id", "name", "age", "email"]))
    assert first.values == {"id": 0, "name": "user_0", "age": 20, "email": None}


def test_seq_scan_ids_are_sequential():
    rows = list(SeqScan("users", ["id", "name"]))
    assert [row.get("id") for row in rows] == list(range(10))
    assert all(row.get("name") == f"user_{row.get('id')}" for row in rows)


def test_seq_scan_age_follows_id():
    rows = list(SeqScan("users", ["id", "age"]))
    assert all(row.get("age") - row.get("id") == 20 for row in rows)


def test_seq_scan_only_requested_columns():
    rows = list(SeqScan("users", ["name"]))
    assert all(row.columns() == ["name"] for row in rows)


def test_seq_scan_no_columns_gives_empty_rows():
    rows = list(SeqScan("users", []))
    assert len(rows) == 10
    assert all(len(row) == 0 for row in rows)


def test_seq_scan_exhausts():
    scan = SeqScan("users", ["id"])
    list(scan)
    assert list(scan) == []


def test_index_scan_is_empty():
    assert list(IndexScan("users", "users_id_idx", ["id"])) == []