"""
Place Result Extractor

Extracts contact details and hours from a SerpAPI Google Maps response.

The response structure for a single-place match contains:
    place_results.title   = name as Google knows it
    place_results.address = full address
    place_results.phone   = phone number
    place_results.hours   = [{'monday': '9 AM–5 PM'}, ...]
"""

from typing import Any, Dict, Optional

from .hours import normalize_hours


def _text_or_none(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def extract_place_details(data: Any) -> Dict[str, Any]:
    """
    Extract address, phone and normalized hours from a search response.

    Args:
        data: Parsed JSON response from the google_maps engine

    Returns:
        Dictionary with 'address', 'phone' and 'hours' (14-field dict).
        Missing values are None.
    """
    place = data.get("place_results") if isinstance(data, dict) else None
    if not isinstance(place, dict):
        place = {}

    return {
        "address": _text_or_none(place.get("address")),
        "phone": _text_or_none(place.get("phone")),
        "hours": normalize_hours(place.get("hours")),
    }
