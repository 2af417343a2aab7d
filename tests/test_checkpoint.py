import csv
import json
import os

from clinic_hours.config import CSV_COLUMNS
from clinic_hours.models import ClinicRecord, RunState

from conftest import success, soft_error


def make_state(*names):
    results = [success(name).record for name in names]
    return RunState(results=results, last_index=len(results))


def test_save_writes_all_three_artifacts(store):
    store.save(make_state("Acme Clinic", "Beta Health"))

    with open(store.progress_file, encoding="utf-8") as f:
        assert json.load(f) == {"lastIndex": 2}

    with open(store.output_json, encoding="utf-8") as f:
        rows = json.load(f)
    assert [row["clinic_name"] for row in rows] == ["Acme Clinic", "Beta Health"]
    assert list(rows[0]) == CSV_COLUMNS
    assert rows[0]["monday_open"] == "9 AM"
    assert rows[0]["error"] is None

    assert not os.path.exists(store.output_json + ".tmp")
    assert not os.path.exists(store.progress_file + ".tmp")


def test_csv_has_fixed_header_even_for_error_records(store):
    state = RunState(results=[soft_error("Nowhere Clinic").record], last_index=1)
    store.save(state)

    with open(store.output_csv, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = list(reader)

    assert reader.fieldnames == CSV_COLUMNS
    assert rows[0]["clinic_name"] == "Nowhere Clinic"
    assert rows[0]["address"] == ""
    assert rows[0]["error"].startswith("Google hasn't")


def test_round_trip(store):
    state = make_state("Acme Clinic")
    state.results.append(ClinicRecord.failed("Beta Health", "Quota exceeded"))
    state.last_index = 2
    store.save(state)

    loaded = store.load_state()

    assert loaded.last_index == 2
    assert loaded.results == state.results


def test_missing_artifacts_start_fresh(store):
    loaded = store.load_state()
    assert loaded.last_index == 0
    assert loaded.results == []


def test_blank_artifacts_start_fresh(store):
    open(store.progress_file, "w").close()
    open(store.output_json, "w").close()

    assert store.load_progress() == 0
    assert store.load_results() == []


def test_corrupt_progress_with_valid_results_restarts_at_zero(store, caplog):
    store.save(make_state("Acme Clinic", "Beta Health"))
    with open(store.progress_file, "w", encoding="utf-8") as f:
        f.write('{"lastIndex": 2')

    assert len(store.load_results()) == 2
    loaded = store.load_state()

    assert loaded.last_index == 0
    assert loaded.results == []
    assert "corrupted" in caplog.text


def test_corrupt_results_with_valid_progress_restarts_at_zero(store, caplog):
    store.save(make_state("Acme Clinic", "Beta Health"))
    with open(store.output_json, "w", encoding="utf-8") as f:
        f.write("[{\"clinic_name\": ")

    assert store.load_progress() == 2
    loaded = store.load_state()

    assert loaded.last_index == 0
    assert loaded.results == []
    assert "corrupted" in caplog.text


def test_results_longer_than_progress_are_truncated(store):
    store.save(make_state("Acme Clinic", "Beta Health", "Gamma Care"))
    store.save_progress(1)

    loaded = store.load_state()

    assert loaded.last_index == 1
    assert [r.clinic_name for r in loaded.results] == ["Acme Clinic"]


def test_progress_ahead_of_results_falls_back(store):
    store.save(make_state("Acme Clinic"))
    store.save_progress(5)

    loaded = store.load_state()

    assert loaded.last_index == 1
    assert len(loaded.results) == 1


def test_wrong_shapes_are_treated_as_corrupt(store):
    for bad in ('{"lastIndex": -1}', '{"lastIndex": "3"}', '{"lastIndex": true}', "[1, 2]"):
        with open(store.progress_file, "w", encoding="utf-8") as f:
            f.write(bad)
        assert store.load_progress() == 0

    with open(store.output_json, "w", encoding="utf-8") as f:
        f.write('{"clinic_name": "Acme Clinic"}')
    assert store.load_results() == []


def test_reset_removes_artifacts(store):
    store.save(make_state("Acme Clinic"))
    store.reset()

    for path in (store.output_json, store.output_csv, store.progress_file):
        assert not os.path.exists(path)
