# scripts/init_db.py
"""
Create the SQL tables up front, or wipe them with --reset.

The SQL store also creates missing tables on first use, so this is only
needed to prepare a database ahead of time or to start from scratch.

Usage:
    python -m scripts.init_db [--reset] [--db-url sqlite:///db.sqlite]
"""

import argparse
import logging
from typing import List, Optional

from sheet_api.config import LOG_FORMAT, LOG_LEVEL
from sheet_api.db.engine import get_engine
from sheet_api.db.schema import metadata

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("init_db")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop every sheet and row before recreating the schema",
    )
    parser.add_argument("--db-url", default=None, help="SQLAlchemy URL (default: SHEET_API_DB_URL)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    engine = get_engine(args.db_url)

    if args.reset:
        logger.warning("Dropping all sheets in %s", engine.url)
        metadata.drop_all(engine)

    metadata.create_all(engine)
    print("DB schema created.")


if __name__ == "__main__":
    main()
