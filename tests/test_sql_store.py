from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from sheet_api.services.tables import append_record, list_records
from sheet_api.store.base import TableNotFoundError
from sheet_api.store.sql import SqlStore


def test_create_and_read_header(sql_store):
    assert not sql_store.exists("Letters")

    sql_store.create("Letters", ["from", "to"])

    assert sql_store.exists("Letters")
    assert sql_store.get_values("Letters") == [["from", "to"]]


def test_rows_keep_their_length_and_types(sql_store):
    sql_store.create("Scores", ["game", "score"])
    sql_store.append_row("Scores", ["chess", 10])
    sql_store.set_header("Scores", ["game", "score", "won"])
    sql_store.append_row("Scores", ["go", 2.5, True])

    assert sql_store.get_values("Scores") == [
        ["game", "score", "won"],
        ["chess", 10],
        ["go", 2.5, True],
    ]


def test_set_header_on_table_without_rows(sql_store):
    sql_store.create("Blank", [])
    assert sql_store.get_values("Blank") == []

    sql_store.set_header("Blank", ["a"])
    sql_store.append_row("Blank", ["1"])

    assert sql_store.get_values("Blank") == [["a"], ["1"]]


def test_missing_table_raises(sql_store):
    with pytest.raises(TableNotFoundError):
        sql_store.get_values("Nope")
    with pytest.raises(TableNotFoundError):
        sql_store.append_row("Nope", ["x"])
    with pytest.raises(TableNotFoundError):
        sql_store.set_header("Nope", ["x"])


def test_duplicate_create_fails(sql_store):
    sql_store.create("Letters", ["from"])
    with pytest.raises(IntegrityError):
        sql_store.create("Letters", ["from"])


def test_tables_are_isolated(sql_store):
    sql_store.create("A", ["x"])
    sql_store.create("B", ["y"])
    sql_store.append_row("A", ["1"])

    assert sql_store.get_values("A") == [["x"], ["1"]]
    assert sql_store.get_values("B") == [["y"]]


def test_data_survives_a_new_store_on_same_database(sql_store):
    sql_store.create("Stories", ["title"])
    sql_store.append_row("Stories", ["once"])

    reopened = SqlStore(sql_store.engine)
    assert reopened.get_values("Stories") == [["title"], ["once"]]


def test_service_round_trip_with_header_growth(sql_store):
    now = datetime(2026, 10, 19, 8, 0, 0, tzinfo=timezone.utc)

    assert list_records(sql_store, "Scores") == []
    append_record(sql_store, "Scores", {"game": "chess", "player": "Al", "score": 10}, now=now)
    append_record(sql_store, "Scores", {"game": "go", "level": "hard"}, now=now)

    first, second = list_records(sql_store, "Scores")
    assert first == {
        "game": "chess",
        "player": "Al",
        "score": 10,
        "date": "",
        "timestamp": "2026-10-19T08:00:00.000Z",
    }
    assert "level" not in first
    assert second["level"] == "hard"
    assert second["player"] == ""
