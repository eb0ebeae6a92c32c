# sheet_api/db/engine.py

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from sheet_api.config import DB_URL


def get_engine(url: Optional[str] = None) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(url or DB_URL, future=True)
