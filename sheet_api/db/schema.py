# sheet_api/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String, DateTime,
    ForeignKey, CheckConstraint, UniqueConstraint, JSON
)

metadata = MetaData()

sheets = Table(
    "sheets",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False, unique=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

# One grid row per record; position 0 holds the header row.
# Rows keep their own length, so a row written before the header grew
# stays shorter than the header.
sheet_rows = Table(
    "sheet_rows",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("sheet_id", Integer, ForeignKey("sheets.id"), nullable=False),
    Column("position", Integer, nullable=False),
    Column("cells", JSON, nullable=False),
    UniqueConstraint("sheet_id", "position", name="uq_sheet_rows_sheet_position"),
    CheckConstraint("position >= 0", name="ck_sheet_rows_position_nonneg"),
)
