"""
Default configuration for the Clinic Hours Scraper.

Module-level constants read once at import time. Override them via
environment variables, ScraperConfig(...) or the command line flags.
"""

import logging
import os

logger = logging.getLogger(__name__)


def _env_float(name, default):
    """Float from an environment variable, or the default if unset or malformed."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number. Using {default}.")
        return default


# SerpAPI endpoint
SERPAPI_ENDPOINT = "https://serpapi.com/search.json"
SERPAPI_ENGINE = "google_maps"
REQUEST_TIMEOUT = 30.0

# Files
INPUT_CSV = os.environ.get("CLINIC_INPUT_CSV", "clinics_clean.csv")
OUTPUT_JSON = os.environ.get("CLINIC_OUTPUT_JSON", "output.json")
OUTPUT_CSV = os.environ.get("CLINIC_OUTPUT_CSV", "output.csv")
PROGRESS_FILE = os.environ.get("CLINIC_PROGRESS_FILE", "progress.json")

# Rate Limiting (seconds)
REQUEST_DELAY = _env_float("CLINIC_REQUEST_DELAY", 1.2)

# Input header spellings accepted for the clinic name column, checked in order
NAME_COLUMN_ALIASES = (
    "clinic_name",
    "name",
    "clinic",
    "Clinic Name",
    "clinic name",
)

# Provider error text that signals the account is out of searches
QUOTA_ERROR_PHRASE = "run out"
QUOTA_ERROR_MESSAGE = "Quota exceeded"

# Hours schema
DAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
CLOSED = "Closed"
ALL_DAY_OPEN = "00:00"
ALL_DAY_CLOSE = "23:59"

HOURS_COLUMNS = [f"{day}_{part}" for day in DAYS for part in ("open", "close")]

# Output Columns (JSON key order and CSV header)
CSV_COLUMNS = ["clinic_name", "address", "phone"] + HOURS_COLUMNS + ["error"]


def get_api_key():
    """SerpAPI key from SERPAPI_API_KEY (or SERPAPI_KEY), read at call time. None when unset."""
    return os.environ.get("SERPAPI_API_KEY") or os.environ.get("SERPAPI_KEY") or None
