# sheet_api/store/gsheets.py
"""
Google Sheets backed store: every table is a worksheet of one spreadsheet.

Sheets returns rectangular grids, so on this backend a column added after a
row was written reads back as "" for that row rather than being absent.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

import gspread
from google.oauth2.service_account import Credentials
from gspread import Spreadsheet, Worksheet
from gspread.exceptions import WorksheetNotFound
from gspread.utils import ValueInputOption, ValueRenderOption, rowcol_to_a1

from sheet_api.store.base import CellValue, Row, TableNotFoundError, TableStore

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive",
]

NEW_SHEET_ROWS = 1000
NEW_SHEET_COLS = 26

# #FF69B4 background, white bold text
HEADER_FORMAT = {
    "backgroundColor": {"red": 1.0, "green": 0.412, "blue": 0.706},
    "textFormat": {
        "foregroundColor": {"red": 1.0, "green": 1.0, "blue": 1.0},
        "bold": True,
    },
}


def authenticate_google(cred_path: Optional[str], cred_json: Optional[str]) -> gspread.Client:
    """
    Authorize a gspread client with a service account.

    The credentials file wins when it exists; otherwise the raw JSON (e.g. from
    a CI secret) is used.
    """
    if cred_path and Path(cred_path).exists():
        logger.info("Using Google credentials from %s", cred_path)
        credentials = Credentials.from_service_account_file(cred_path, scopes=SCOPES)
    elif cred_json:
        logger.info("Using Google credentials from GOOGLE_CREDENTIALS_JSON")
        credentials = Credentials.from_service_account_info(json.loads(cred_json), scopes=SCOPES)
    else:
        raise RuntimeError(
            f"Google credentials not found (checked {cred_path!r} and GOOGLE_CREDENTIALS_JSON)"
        )

    return gspread.authorize(credentials)


class GoogleSheetsStore(TableStore):

    def __init__(self, spreadsheet: Spreadsheet):
        self.ss = spreadsheet

    @classmethod
    def from_url(cls, url: str, cred_path: Optional[str], cred_json: Optional[str]) -> "GoogleSheetsStore":
        if not url:
            raise RuntimeError("GOOGLE_SHEET_URL is not set")
        client = authenticate_google(cred_path, cred_json)
        return cls(client.open_by_url(url))

    def _worksheet(self, name: str) -> Worksheet:
        try:
            return self.ss.worksheet(name)
        except WorksheetNotFound:
            raise TableNotFoundError(name) from None

    def exists(self, name: str) -> bool:
        try:
            self.ss.worksheet(name)
        except WorksheetNotFound:
            return False
        return True

    def create(self, name: str, headers: Sequence[CellValue]) -> None:
        ws = self.ss.add_worksheet(
            title=name, rows=NEW_SHEET_ROWS, cols=max(NEW_SHEET_COLS, len(headers))
        )
        if not headers:
            return

        ws.update(
            values=[list(headers)],
            range_name="A1",
            value_input_option=ValueInputOption.raw,
        )
        ws.format(f"A1:{rowcol_to_a1(1, len(headers))}", HEADER_FORMAT)

    def get_values(self, name: str) -> List[Row]:
        ws = self._worksheet(name)
        return ws.get_all_values(value_render_option=ValueRenderOption.unformatted)

    def set_header(self, name: str, headers: Sequence[CellValue]) -> None:
        ws = self._worksheet(name)
        if len(headers) > ws.col_count:
            ws.add_cols(len(headers) - ws.col_count)

        ws.update(
            values=[list(headers)],
            range_name="A1",
            value_input_option=ValueInputOption.raw,
        )

    def append_row(self, name: str, row: Sequence[CellValue]) -> None:
        ws = self._worksheet(name)
        ws.append_row(
            list(row),
            value_input_option=ValueInputOption.raw,
            table_range="A1",
        )
