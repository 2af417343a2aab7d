"""
Search Execution

Runs one SerpAPI Google Maps lookup per clinic name and tags the outcome.
"""

import httpx
from typing import Any, Dict, Optional

from ..config import (
    SERPAPI_ENDPOINT,
    SERPAPI_ENGINE,
    REQUEST_TIMEOUT,
    QUOTA_ERROR_PHRASE,
    QUOTA_ERROR_MESSAGE,
)
from ..models import ClinicRecord, FetchOutcome, FetchResult
from ..parsers import extract_place_details


def build_search_params(
    clinic_name: str,
    api_key: str,
    engine: str = SERPAPI_ENGINE,
) -> Dict[str, str]:
    """Build the query string for a single lookup."""
    return {
        "engine": engine,
        "q": clinic_name,
        "api_key": api_key,
    }


def is_quota_error(error_text: str) -> bool:
    """True when the provider says the account has run out of searches."""
    return QUOTA_ERROR_PHRASE in error_text.lower()


def classify_response(clinic_name: str, data: Any) -> FetchResult:
    """
    Map a parsed SerpAPI response to a tagged outcome.

    Args:
        clinic_name: Name that was searched
        data: Parsed JSON response

    Returns:
        FetchResult tagged QUOTA, SOFT_ERROR or SUCCESS
    """
    if not isinstance(data, dict):
        return FetchResult(
            FetchOutcome.SOFT_ERROR,
            ClinicRecord.failed(clinic_name, "Unexpected response from SerpAPI"),
        )

    error = data.get("error")
    if error:
        error = str(error)
        if is_quota_error(error):
            return FetchResult(
                FetchOutcome.QUOTA,
                ClinicRecord.failed(clinic_name, QUOTA_ERROR_MESSAGE),
            )
        return FetchResult(FetchOutcome.SOFT_ERROR, ClinicRecord.failed(clinic_name, error))

    details = extract_place_details(data)
    return FetchResult(
        FetchOutcome.SUCCESS,
        ClinicRecord(
            clinic_name=clinic_name,
            address=details["address"],
            phone=details["phone"],
            hours=details["hours"],
        ),
    )


def fetch_clinic(
    clinic_name: str,
    api_key: str,
    client: Optional[httpx.Client] = None,
    engine: str = SERPAPI_ENGINE,
    endpoint: str = SERPAPI_ENDPOINT,
    timeout: float = REQUEST_TIMEOUT,
) -> FetchResult:
    """
    Look up one clinic. Exactly one HTTP round trip, no retries.

    SerpAPI reports account errors (bad key, no searches left) as a JSON body
    with an "error" field, often alongside a 4xx status, so the body is read
    regardless of status code.

    Args:
        clinic_name: Clinic name used as the search query
        api_key: SerpAPI key
        client: Shared httpx client (a short-lived one is created if None)
        engine: SerpAPI engine selector
        endpoint: SerpAPI search URL
        timeout: Request timeout in seconds

    Returns:
        FetchResult for this clinic. Never raises for provider or transport errors.
    """
    params = build_search_params(clinic_name, api_key, engine)

    try:
        if client is None:
            with httpx.Client(timeout=timeout) as own_client:
                response = own_client.get(endpoint, params=params)
        else:
            response = client.get(endpoint, params=params)
    except httpx.HTTPError as e:
        return FetchResult(
            FetchOutcome.SOFT_ERROR,
            ClinicRecord.failed(clinic_name, f"Request failed: {e}"),
        )

    try:
        data = response.json()
    except ValueError:
        return FetchResult(
            FetchOutcome.SOFT_ERROR,
            ClinicRecord.failed(
                clinic_name,
                f"API error: {response.status_code} - {response.text[:200]}",
            ),
        )

    if response.is_error and not (isinstance(data, dict) and data.get("error")):
        return FetchResult(
            FetchOutcome.SOFT_ERROR,
            ClinicRecord.failed(
                clinic_name,
                f"API error: {response.status_code} - {response.text[:200]}",
            ),
        )

    return classify_response(clinic_name, data)
