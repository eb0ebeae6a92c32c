import pytest
from fastapi.testclient import TestClient

from sheet_api.db.engine import get_engine
from sheet_api.deps import get_store
from sheet_api.main import app
from sheet_api.store.memory import MemoryStore
from sheet_api.store.sql import SqlStore


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def sql_store(tmp_path):
    return SqlStore(get_engine(f"sqlite:///{tmp_path / 'sheets.sqlite'}"))


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
