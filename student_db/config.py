# /student_db/config.py

"""
Environment-driven settings for the student directory.

Values are read once at import time. Every component also accepts explicit
arguments, so tests and embedding applications never have to touch the
environment.
"""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# --- Storage ---
# SQLite file next to the working directory unless told otherwise.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./student_db.sqlite3")

# Durable home of the student photos (the asset store).
PHOTO_DIR = os.getenv("PHOTO_DIR", "./photos")
PHOTO_JPEG_QUALITY = int(os.getenv("PHOTO_JPEG_QUALITY", "80"))


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    return float(raw)


# Upper bound for a single store call. Unset means "wait forever".
STORE_TIMEOUT_SECONDS = _optional_float(os.getenv("STORE_TIMEOUT_SECONDS"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
