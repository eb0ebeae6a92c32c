# sheet_api/store/memory.py

from typing import Dict, List, Sequence

from sheet_api.store.base import CellValue, Row, TableNotFoundError, TableStore


class MemoryStore(TableStore):
    """
    Process-local grid store. Used by the tests and by SHEET_API_BACKEND=memory.
    """

    def __init__(self):
        self._tables: Dict[str, List[Row]] = {}

    def _rows(self, name: str) -> List[Row]:
        try:
            return self._tables[name]
        except KeyError:
            raise TableNotFoundError(name) from None

    def exists(self, name: str) -> bool:
        return name in self._tables

    def create(self, name: str, headers: Sequence[CellValue]) -> None:
        if name in self._tables:
            raise ValueError(f"Sheet already exists: {name}")
        self._tables[name] = [list(headers)] if headers else []

    def get_values(self, name: str) -> List[Row]:
        return [list(row) for row in self._rows(name)]

    def set_header(self, name: str, headers: Sequence[CellValue]) -> None:
        rows = self._rows(name)
        if rows:
            rows[0] = list(headers)
        else:
            rows.append(list(headers))

    def append_row(self, name: str, row: Sequence[CellValue]) -> None:
        self._rows(name).append(list(row))
