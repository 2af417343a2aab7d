"""
ClinicHoursScraper - High-level API for clinic hours collection.

Owns the HTTP client and configuration, and exposes clean methods for
loading names, looking up a single clinic and running a resumable batch.

Usage:
    from clinic_hours import ClinicHoursScraper

    with ClinicHoursScraper(api_key="...") as scraper:
        state = scraper.run(input_file="clinics_clean.csv")
        for record in state.results:
            print(record.clinic_name, record.address)
"""

from typing import List, Optional

import httpx

from .config_manager import ScraperConfig
from .extraction import CheckpointStore, fetch_clinic, load_clinic_names, run_clinics
from .models import FetchResult, RunState


class ClinicHoursScraper:
    """High-level interface for clinic hours collection.

    Args:
        api_key: SerpAPI key. Falls back to SERPAPI_API_KEY / SERPAPI_KEY.
        config: Full ScraperConfig (api_key, if given, overrides its key).
        client: Optional httpx.Client to use instead of an owned one.

    Example:
        with ClinicHoursScraper(api_key="...") as scraper:
            result = scraper.fetch("Acme Clinic")
            print(result.outcome, result.record.hours["monday_open"])
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[ScraperConfig] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.config = config or ScraperConfig()
        if api_key:
            self.config.api_key = api_key

        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.config.timeout)
        self.store = CheckpointStore(
            output_json=self.config.output_json,
            output_csv=self.config.output_csv,
            progress_file=self.config.progress_file,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def load(self, input_file: Optional[str] = None) -> List[str]:
        """Load clinic names from the configured (or given) input CSV."""
        return load_clinic_names(input_file or self.config.input_csv)

    def fetch(self, clinic_name: str) -> FetchResult:
        """Look up a single clinic."""
        return fetch_clinic(
            clinic_name,
            self.config.require_api_key(),
            client=self._client,
            engine=self.config.engine,
            endpoint=self.config.endpoint,
            timeout=self.config.timeout,
        )

    def run(
        self,
        names: Optional[List[str]] = None,
        input_file: Optional[str] = None,
        resume: bool = True,
    ) -> RunState:
        """Process all clinics, resuming from the last checkpoint if asked.

        Args:
            names: Clinic names to process. Loaded from the input CSV if None.
            input_file: Input CSV path (overrides config.input_csv).
            resume: Continue from the saved progress marker.

        Returns:
            Final RunState.
        """
        self.config.require_api_key()
        if names is None:
            names = self.load(input_file)

        return run_clinics(
            names,
            self.fetch,
            self.store,
            delay=self.config.request_delay,
            resume=resume,
        )
