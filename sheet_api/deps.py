# sheet_api/deps.py

from functools import lru_cache

from sheet_api import config
from sheet_api.store.base import TableStore


def build_store(backend: str) -> TableStore:
    if backend == "sqlite":
        from sheet_api.store.sql import SqlStore

        return SqlStore()

    if backend == "gsheets":
        from sheet_api.store.gsheets import GoogleSheetsStore

        return GoogleSheetsStore.from_url(
            config.GOOGLE_SHEET_URL,
            config.GOOGLE_CRED_PATH,
            config.GOOGLE_CREDENTIALS_JSON,
        )

    if backend == "memory":
        from sheet_api.store.memory import MemoryStore

        return MemoryStore()

    raise ValueError(f"Unknown SHEET_API_BACKEND: {backend!r}")


@lru_cache(maxsize=None)
def get_store() -> TableStore:
    """
    FastAPI dependency returning the process-wide store.
    Tests swap it out through app.dependency_overrides.
    """
    return build_store(config.BACKEND)
