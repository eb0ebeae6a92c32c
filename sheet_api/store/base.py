# sheet_api/store/base.py
"""
The table store capability the service layer talks to.

A store holds named 2-D grids. Row 0 of a grid is its header row; every
other row is a data row. Stores only move cells around: header growth,
default headers and record building live in sheet_api.services.tables.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Union

CellValue = Union[str, int, float, bool]
Row = List[CellValue]


class TableNotFoundError(LookupError):
    def __init__(self, name: str):
        super().__init__(f"Sheet not found: {name}")
        self.name = name


class TableStore(ABC):

    @abstractmethod
    def exists(self, name: str) -> bool:
        ...

    @abstractmethod
    def create(self, name: str, headers: Sequence[CellValue]) -> None:
        """Create a new table whose only row is ``headers``."""

    @abstractmethod
    def get_values(self, name: str) -> List[Row]:
        """Return every row, header first. Rows may be shorter than the header."""

    @abstractmethod
    def set_header(self, name: str, headers: Sequence[CellValue]) -> None:
        """Rewrite row 0, leaving data rows untouched."""

    @abstractmethod
    def append_row(self, name: str, row: Sequence[CellValue]) -> None:
        ...
