"""
Configuration manager for library and CLI usage.

Bridges explicit arguments, environment variables and the module-level
defaults in config.py into one object.
"""

from dataclasses import dataclass
from typing import Optional

from . import config
from .exceptions import ConfigurationError


@dataclass
class ScraperConfig:
    """Configuration for ClinicHoursScraper.

    For the API key: explicit arg > env vars (SERPAPI_API_KEY, SERPAPI_KEY), via config.get_api_key().
    Every other field defaults to the matching config.py constant.

    Args:
        api_key: SerpAPI key. Required before the first lookup.
        input_csv: Path of the CSV holding clinic names.
        output_json: Path of the JSON results file.
        output_csv: Path of the CSV results file.
        progress_file: Path of the progress marker.
        request_delay: Pause between lookups (seconds).
        engine: SerpAPI engine selector.
        endpoint: SerpAPI search URL.
        timeout: HTTP timeout per lookup (seconds).
    """

    api_key: Optional[str] = None
    input_csv: str = config.INPUT_CSV
    output_json: str = config.OUTPUT_JSON
    output_csv: str = config.OUTPUT_CSV
    progress_file: str = config.PROGRESS_FILE
    request_delay: float = config.REQUEST_DELAY
    engine: str = config.SERPAPI_ENGINE
    endpoint: str = config.SERPAPI_ENDPOINT
    timeout: float = config.REQUEST_TIMEOUT

    def __post_init__(self):
        """Resolve the API key from env vars if not explicitly set."""
        if not self.api_key:
            self.api_key = config.get_api_key()
        if self.request_delay < 0:
            raise ConfigurationError(f"request_delay must be >= 0, got {self.request_delay}")

    def require_api_key(self) -> str:
        """Return the API key or raise ConfigurationError when none is configured."""
        if not self.api_key:
            raise ConfigurationError(
                "No SerpAPI key configured. Set SERPAPI_API_KEY or pass --api-key."
            )
        return self.api_key
