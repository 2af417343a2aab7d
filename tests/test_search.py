import httpx
import pytest

from clinic_hours.extraction import fetch_clinic, classify_response
from clinic_hours.models import FetchOutcome


def make_client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def respond_with(status_code, **kwargs):
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(status_code, **kwargs)

    return make_client(handler), requests


PLACE_RESPONSE = {
    "search_metadata": {"status": "Success"},
    "place_results": {
        "title": "Acme Clinic",
        "address": "12 High St, Springfield",
        "phone": "(555) 123-4567",
        "hours": [
            {"wednesday": "9 AM–5 PM"},
            {"monday": "9 AM–5 PM"},
            {"tuesday": "Closed"},
        ],
    },
}


def test_one_request_with_engine_query_and_key():
    client, requests = respond_with(200, json=PLACE_RESPONSE)

    fetch_clinic("Acme Clinic", "secret", client=client)

    assert len(requests) == 1
    params = requests[0].url.params
    assert params["engine"] == "google_maps"
    assert params["q"] == "Acme Clinic"
    assert params["api_key"] == "secret"


def test_success_maps_place_results():
    client, _ = respond_with(200, json=PLACE_RESPONSE)

    result = fetch_clinic("Acme Clinic", "secret", client=client)

    assert result.outcome is FetchOutcome.SUCCESS
    record = result.record
    assert record.clinic_name == "Acme Clinic"
    assert record.address == "12 High St, Springfield"
    assert record.phone == "(555) 123-4567"
    assert record.error is None
    assert record.hours["monday_open"] == "9 AM"
    assert record.hours["tuesday_close"] == "Closed"
    assert record.hours["sunday_open"] is None
    assert len(record.hours) == 14


def test_success_without_place_results_leaves_fields_unset():
    client, _ = respond_with(200, json={"local_results": []})

    result = fetch_clinic("Acme Clinic", "secret", client=client)

    assert result.outcome is FetchOutcome.SUCCESS
    assert result.record.address is None
    assert result.record.phone is None
    assert all(v is None for v in result.record.hours.values())


def test_run_out_of_searches_is_quota():
    client, _ = respond_with(429, json={"error": "Your account has run out of searches."})

    result = fetch_clinic("Beta Health", "secret", client=client)

    assert result.outcome is FetchOutcome.QUOTA
    assert result.is_fatal
    assert result.record.clinic_name == "Beta Health"
    assert result.record.error == "Quota exceeded"


def test_other_provider_error_is_soft():
    message = "Google hasn't returned any results for this query."
    client, _ = respond_with(200, json={"error": message})

    result = fetch_clinic("Nowhere Clinic", "secret", client=client)

    assert result.outcome is FetchOutcome.SOFT_ERROR
    assert not result.is_fatal
    assert result.record.error == message
    assert result.record.address is None


def test_transport_failure_is_soft():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    result = fetch_clinic("Acme Clinic", "secret", client=make_client(handler))

    assert result.outcome is FetchOutcome.SOFT_ERROR
    assert "connection refused" in result.record.error


@pytest.mark.parametrize("status_code, kwargs", [
    (502, {"text": "Bad gateway"}),
    (500, {"json": {}}),
])
def test_bad_http_response_is_soft(status_code, kwargs):
    client, _ = respond_with(status_code, **kwargs)

    result = fetch_clinic("Acme Clinic", "secret", client=client)

    assert result.outcome is FetchOutcome.SOFT_ERROR
    assert str(status_code) in result.record.error


def test_classify_unexpected_payload():
    result = classify_response("Acme Clinic", ["not", "a", "dict"])
    assert result.outcome is FetchOutcome.SOFT_ERROR
