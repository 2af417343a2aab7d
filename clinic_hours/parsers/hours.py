"""
Opening Hours Normalizer

Maps the hours list from a SerpAPI place result into a fixed 14-field schema.

Input structure (day order is arbitrary, unknown days may appear):
    [
        {'monday': '9 AM–5 PM'},
        {'tuesday': 'Closed'},
        {'wednesday': 'Open 24 hours'},
        ...
    ]

Output:
    {'monday_open': '9 AM', 'monday_close': '5 PM',
     'tuesday_open': 'Closed', 'tuesday_close': 'Closed',
     'wednesday_open': '00:00', 'wednesday_close': '23:59',
     ...every other field None}
"""

import re
from typing import Any, Dict, Optional, Tuple

from ..config import ALL_DAY_CLOSE, ALL_DAY_OPEN, CLOSED, DAYS, HOURS_COLUMNS

# En-dash or hyphen
RANGE_SEPARATOR = re.compile(r"[–-]")


def empty_hours() -> Dict[str, Optional[str]]:
    """All 14 fields unset."""
    return {col: None for col in HOURS_COLUMNS}


def canonical_day(key: Any) -> Optional[str]:
    """Return the schema day for a provider day key, or None if unrecognized."""
    if not isinstance(key, str):
        return None
    day = key.strip().lower()
    return day if day in DAYS else None


def parse_day_text(text: str) -> Tuple[Optional[str], Optional[str]]:
    """Turn one day's free text into an (open, close) pair.

    "Closed" and "24" checks run before the range split, since their text
    would not split cleanly.
    """
    lowered = text.lower()
    if "closed" in lowered:
        return CLOSED, CLOSED
    if "24" in lowered:
        return ALL_DAY_OPEN, ALL_DAY_CLOSE

    parts = RANGE_SEPARATOR.split(text)
    if len(parts) != 2:
        return None, None
    open_time, close_time = parts[0].strip(), parts[1].strip()
    if not open_time or not close_time:
        return None, None
    return open_time, close_time


def normalize_hours(hours: Any) -> Dict[str, Optional[str]]:
    """
    Normalize a provider hours list into the fixed weekly schema.

    Args:
        hours: List of single-key {day: text} mappings, or anything else

    Returns:
        Dictionary with exactly the 14 <day>_open / <day>_close keys
    """
    result = empty_hours()
    if not isinstance(hours, list):
        return result

    for entry in hours:
        if not isinstance(entry, dict) or not entry:
            continue

        key, value = next(iter(entry.items()))
        day = canonical_day(key)
        if day is None or not isinstance(value, str):
            continue

        open_time, close_time = parse_day_text(value)
        result[f"{day}_open"] = open_time
        result[f"{day}_close"] = close_time

    return result
