# sheet_api/store/sql.py

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.engine import Connection, Engine

from sheet_api.db.engine import get_engine
from sheet_api.db.schema import metadata, sheet_rows, sheets
from sheet_api.store.base import CellValue, Row, TableNotFoundError, TableStore


class SqlStore(TableStore):
    """
    Grid store on top of a SQL database (SQLite by default).

    Each append computes the next position inside its own transaction but
    takes no lock; two writers racing on one table collide on the
    (sheet_id, position) unique constraint and one of them fails.
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine if engine is not None else get_engine()
        metadata.create_all(self.engine)

    def _sheet_id(self, conn: Connection, name: str) -> Optional[int]:
        stmt = select(sheets.c.id).where(sheets.c.name == name)
        return conn.execute(stmt).scalar_one_or_none()

    def _require_sheet_id(self, conn: Connection, name: str) -> int:
        sheet_id = self._sheet_id(conn, name)
        if sheet_id is None:
            raise TableNotFoundError(name)
        return sheet_id

    def exists(self, name: str) -> bool:
        with self.engine.connect() as conn:
            return self._sheet_id(conn, name) is not None

    def create(self, name: str, headers: Sequence[CellValue]) -> None:
        with self.engine.begin() as conn:
            result = conn.execute(
                sheets.insert().values(name=name, created_at=datetime.now(timezone.utc))
            )
            sheet_id = result.inserted_primary_key[0]

            if headers:
                conn.execute(
                    sheet_rows.insert().values(
                        sheet_id=sheet_id, position=0, cells=list(headers)
                    )
                )

    def get_values(self, name: str) -> List[Row]:
        with self.engine.connect() as conn:
            sheet_id = self._require_sheet_id(conn, name)
            stmt = (
                select(sheet_rows.c.cells)
                .where(sheet_rows.c.sheet_id == sheet_id)
                .order_by(sheet_rows.c.position)
            )
            return [list(cells) for cells in conn.execute(stmt).scalars().all()]

    def set_header(self, name: str, headers: Sequence[CellValue]) -> None:
        with self.engine.begin() as conn:
            sheet_id = self._require_sheet_id(conn, name)
            result = conn.execute(
                sheet_rows.update()
                .where(sheet_rows.c.sheet_id == sheet_id, sheet_rows.c.position == 0)
                .values(cells=list(headers))
            )
            if result.rowcount == 0:
                conn.execute(
                    sheet_rows.insert().values(
                        sheet_id=sheet_id, position=0, cells=list(headers)
                    )
                )

    def append_row(self, name: str, row: Sequence[CellValue]) -> None:
        with self.engine.begin() as conn:
            sheet_id = self._require_sheet_id(conn, name)
            next_position = conn.execute(
                select(func.coalesce(func.max(sheet_rows.c.position), -1) + 1)
                .where(sheet_rows.c.sheet_id == sheet_id)
            ).scalar_one()

            conn.execute(
                sheet_rows.insert().values(
                    sheet_id=sheet_id, position=next_position, cells=list(row)
                )
            )
