# sheet_api/config.py
"""
Runtime settings, read from the environment (and a .env file in the project
root when one exists).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_DIR = Path(__file__).resolve().parent.parent

env_path = PROJECT_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)

# sqlite | gsheets | memory
BACKEND = os.getenv("SHEET_API_BACKEND", "sqlite").strip().lower()

DB_URL = os.getenv("SHEET_API_DB_URL", "sqlite:///db.sqlite").strip()  # file in project root

GOOGLE_SHEET_URL = os.getenv("GOOGLE_SHEET_URL", "").strip()
GOOGLE_CRED_PATH = os.getenv("GOOGLE_APPLICATION_CREDENTIALS", "credentials.json").strip()
GOOGLE_CREDENTIALS_JSON = os.getenv("GOOGLE_CREDENTIALS_JSON", "").strip()

LOG_LEVEL = os.getenv("SHEET_API_LOG_LEVEL", "INFO").strip().upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
