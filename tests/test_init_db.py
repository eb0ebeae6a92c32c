from scripts import init_db
from sheet_api.db.engine import get_engine
from sheet_api.store.sql import SqlStore


def _url(tmp_path):
    return f"sqlite:///{tmp_path / 'init.sqlite'}"


def test_init_keeps_existing_sheets(tmp_path):
    store = SqlStore(get_engine(_url(tmp_path)))
    store.create("Letters", ["from"])

    init_db.main(["--db-url", _url(tmp_path)])

    assert store.get_values("Letters") == [["from"]]


def test_reset_drops_existing_sheets(tmp_path, capsys):
    store = SqlStore(get_engine(_url(tmp_path)))
    store.create("Letters", ["from"])
    store.append_row("Letters", ["a"])

    init_db.main(["--db-url", _url(tmp_path), "--reset"])

    assert "DB schema created." in capsys.readouterr().out
    assert not store.exists("Letters")
    store.create("Letters", ["from"])
    assert store.get_values("Letters") == [["from"]]
