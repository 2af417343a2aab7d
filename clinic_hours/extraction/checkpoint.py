"""
Checkpoint Store

Durable copies of the run: results as JSON and CSV, plus a progress marker
holding the number of clinics fully processed. Every file is rewritten whole
on each checkpoint.
"""

import csv
import json
import logging
import os
from typing import Any, List, Optional

from ..config import CSV_COLUMNS, OUTPUT_CSV, OUTPUT_JSON, PROGRESS_FILE
from ..models import ClinicRecord, RunState

logger = logging.getLogger(__name__)


def _write_atomic(path: str, write) -> None:
    """Write via a temp file and move it into place so a crash keeps the old copy."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, 'w', newline='', encoding='utf-8') as f:
        write(f)
    os.replace(tmp, path)


def _read_json(path: str) -> Optional[Any]:
    """Parsed JSON content, or None when the file is missing or blank."""
    if not os.path.exists(path):
        return None
    with open(path, 'r', encoding='utf-8') as f:
        raw = f.read().strip()
    if not raw:
        return None
    return json.loads(raw)


class CheckpointStore:
    """Persists RunState after every processed clinic and restores it at startup.

    The results file and the progress marker are loaded independently: a
    corrupt copy of one resets only that one.
    """

    def __init__(
        self,
        output_json: str = OUTPUT_JSON,
        output_csv: Optional[str] = OUTPUT_CSV,
        progress_file: str = PROGRESS_FILE,
    ):
        self.output_json = output_json
        self.output_csv = output_csv
        self.progress_file = progress_file

    # -------------------------------------------------------------------------
    # Save
    # -------------------------------------------------------------------------

    def save_results(self, results: List[ClinicRecord]) -> None:
        rows = [record.to_dict() for record in results]

        _write_atomic(
            self.output_json,
            lambda f: json.dump(rows, f, indent=2, ensure_ascii=False),
        )

        if self.output_csv:
            def write_csv(f):
                writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
                writer.writeheader()
                for row in rows:
                    writer.writerow({k: ('' if v is None else v) for k, v in row.items()})

            _write_atomic(self.output_csv, write_csv)

        logger.info(f"Saved {len(rows)} clinics")

    def save_progress(self, last_index: int) -> None:
        _write_atomic(
            self.progress_file,
            lambda f: json.dump({"lastIndex": last_index}, f),
        )

    def save(self, state: RunState) -> None:
        """Checkpoint results first, then the marker that points past them."""
        self.save_results(state.results)
        self.save_progress(state.last_index)

    # -------------------------------------------------------------------------
    # Load
    # -------------------------------------------------------------------------

    def load_progress(self) -> int:
        """Last saved index, or 0 if the marker is missing or corrupt."""
        try:
            data = _read_json(self.progress_file)
        except (OSError, ValueError) as e:
            logger.warning(f"{self.progress_file} corrupted ({e}). Starting fresh.")
            return 0

        if data is None:
            return 0

        last_index = data.get("lastIndex", 0) if isinstance(data, dict) else None
        if isinstance(last_index, bool) or not isinstance(last_index, int) or last_index < 0:
            logger.warning(f"{self.progress_file} corrupted (bad lastIndex). Starting fresh.")
            return 0
        return last_index

    def load_results(self) -> List[ClinicRecord]:
        """Previously saved records, or [] if the file is missing or corrupt."""
        try:
            data = _read_json(self.output_json)
        except (OSError, ValueError) as e:
            logger.warning(f"{self.output_json} corrupted ({e}). Starting fresh.")
            return []

        if data is None:
            return []

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.warning(f"{self.output_json} corrupted (expected a list of records). Starting fresh.")
            return []
        return [ClinicRecord.from_dict(item) for item in data]

    def load_state(self) -> RunState:
        """
        Restore RunState from disk.

        Resumes from min(lastIndex, number of saved records) and truncates the
        records to that length, so len(results) == last_index on return.
        """
        last_index = self.load_progress()
        results = self.load_results()

        resume_index = min(last_index, len(results))
        if resume_index != last_index or resume_index != len(results):
            logger.warning(
                f"Progress marker ({last_index}) and saved results ({len(results)}) "
                f"disagree. Resuming from index {resume_index}."
            )

        if resume_index:
            logger.info(f"Resuming from index {resume_index + 1}")

        return RunState(results=results[:resume_index], last_index=resume_index)

    def reset(self) -> None:
        """Delete every checkpoint artifact."""
        for path in (self.output_json, self.output_csv, self.progress_file):
            if path and os.path.exists(path):
                os.remove(path)
