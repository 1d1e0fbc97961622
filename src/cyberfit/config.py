"""Environment-variable-based configuration for the store and its collaborators."""

from __future__ import annotations

import os
from pathlib import Path

DATA_DIR: Path = Path(os.environ.get("CYBERFIT_DATA_DIR", "~/.cyberfit")).expanduser()
STORAGE_KEY: str = os.environ.get("CYBERFIT_STORAGE_KEY", "cyberfit_data_v1")
# IANA zone used for calendar-day bucketing; empty = system local time
TIMEZONE: str = os.environ.get("CYBERFIT_TZ", "")

GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
GEMINI_MODEL: str = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")

OPENFOODFACTS_URL: str = os.environ.get(
    "OPENFOODFACTS_URL", "https://world.openfoodfacts.org/api/v2/product"
)
FOOD_LOOKUP_TIMEOUT_S: float = float(os.environ.get("FOOD_LOOKUP_TIMEOUT_S", "10"))
