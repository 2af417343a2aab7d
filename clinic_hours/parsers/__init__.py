"""
Parsers module for turning SerpAPI responses into clinic records.

- hours.py: Normalize opening hours into the fixed weekly schema
- place.py: Extract address, phone and hours from a place result
"""

from .hours import normalize_hours, empty_hours
from .place import extract_place_details
