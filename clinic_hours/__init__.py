"""
Clinic Hours Scraper

Looks up clinics on Google Maps through SerpAPI and collects their address,
phone number and weekly opening hours, checkpointing after every clinic so
an interrupted run picks up where it stopped.

Quick start (library usage):
    from clinic_hours import ClinicHoursScraper

    with ClinicHoursScraper(api_key="...") as scraper:
        state = scraper.run(input_file="clinics_clean.csv")
        print(f"{state.last_index} clinics processed")

Or use the lower-level functions directly:
    from clinic_hours import normalize_hours
    normalize_hours([{"monday": "9 AM–5 PM"}])
"""

from .scraper import ClinicHoursScraper
from .config_manager import ScraperConfig
from .models import ClinicRecord, RunState, FetchOutcome, FetchResult
from .parsers import normalize_hours
from .extraction import load_clinic_names, fetch_clinic, run_clinics, CheckpointStore

__version__ = "1.0.0"
__all__ = [
    "ClinicHoursScraper",
    "ScraperConfig",
    "ClinicRecord",
    "RunState",
    "FetchOutcome",
    "FetchResult",
    "normalize_hours",
    "load_clinic_names",
    "fetch_clinic",
    "run_clinics",
    "CheckpointStore",
]
