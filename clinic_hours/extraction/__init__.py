"""
Extraction module for collecting clinic data.

- loader.py: Read clinic names from the input CSV
- search.py: Execute one SerpAPI lookup per clinic
- checkpoint.py: Persist and restore run state
- collector.py: Main collection loop
"""

from .loader import load_clinic_names
from .search import fetch_clinic, classify_response
from .checkpoint import CheckpointStore
from .collector import run_clinics
