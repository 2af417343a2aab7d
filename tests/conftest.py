import pytest

from clinic_hours.extraction import CheckpointStore
from clinic_hours.extraction import collector as collector_module
from clinic_hours.models import ClinicRecord, FetchOutcome, FetchResult
from clinic_hours.parsers import normalize_hours


def success(name, address="1 Main St", phone="(555) 010-0000", hours=None):
    return FetchResult(
        FetchOutcome.SUCCESS,
        ClinicRecord(
            clinic_name=name,
            address=address,
            phone=phone,
            hours=normalize_hours(hours if hours is not None else [{"monday": "9 AM–5 PM"}]),
        ),
    )


def soft_error(name, message="Google hasn't returned any results for this query."):
    return FetchResult(FetchOutcome.SOFT_ERROR, ClinicRecord.failed(name, message))


def quota(name):
    return FetchResult(FetchOutcome.QUOTA, ClinicRecord.failed(name, "Quota exceeded"))


@pytest.fixture
def store(tmp_path):
    return CheckpointStore(
        output_json=str(tmp_path / "output.json"),
        output_csv=str(tmp_path / "output.csv"),
        progress_file=str(tmp_path / "progress.json"),
    )


@pytest.fixture
def sleeps(monkeypatch):
    """Record pacing delays instead of sleeping."""
    calls = []
    monkeypatch.setattr(collector_module.time, "sleep", lambda seconds: calls.append(seconds))
    return calls


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="clinics.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
