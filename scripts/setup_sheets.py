# scripts/setup_sheets.py
"""
One-off setup: make sure the curated sheets (Letters, Wishlist, Dreams,
Stories, Scores) exist in the configured store.

Usage:
    python -m scripts.setup_sheets
"""

import logging

from sheet_api.config import LOG_FORMAT, LOG_LEVEL
from sheet_api.deps import get_store
from sheet_api.services.tables import initialize_tables

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

SETUP_COMPLETE = "Setup complete! All sheets created."


def main() -> str:
    created = initialize_tables(get_store())

    if created:
        logger.info("Created sheets: %s", ", ".join(created))
    else:
        logger.info("All sheets already existed")

    print(SETUP_COMPLETE)
    return SETUP_COMPLETE


if __name__ == "__main__":
    main()
