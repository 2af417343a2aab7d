"""
Data models shared by the loader, fetcher, collector and checkpoint store.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .config import CSV_COLUMNS, HOURS_COLUMNS


def _unset_hours() -> Dict[str, Optional[str]]:
    return {col: None for col in HOURS_COLUMNS}


@dataclass
class ClinicRecord:
    """One row of output: a clinic's contact details and weekly hours.

    A record with ``error`` set is a permanently failed lookup. It still
    occupies the slot of its clinic name in the results.
    """

    clinic_name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    hours: Dict[str, Optional[str]] = field(default_factory=_unset_hours)
    error: Optional[str] = None

    @classmethod
    def failed(cls, clinic_name: str, error: str) -> "ClinicRecord":
        return cls(clinic_name=clinic_name, error=error)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClinicRecord":
        """Rebuild a record from its flat JSON form. Unknown keys are ignored."""
        return cls(
            clinic_name=data.get("clinic_name") or "",
            address=data.get("address"),
            phone=data.get("phone"),
            hours={col: data.get(col) for col in HOURS_COLUMNS},
            error=data.get("error"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to the fixed column set, every column present."""
        flat = {
            "clinic_name": self.clinic_name,
            "address": self.address,
            "phone": self.phone,
            "error": self.error,
        }
        for col in HOURS_COLUMNS:
            flat[col] = self.hours.get(col)
        return {col: flat[col] for col in CSV_COLUMNS}


@dataclass
class RunState:
    """Results accumulated so far and the count of names fully processed.

    ``halted`` is not persisted; it tells the caller a quota outcome
    stopped the run early.
    """

    results: List[ClinicRecord] = field(default_factory=list)
    last_index: int = 0
    halted: bool = False


class FetchOutcome(Enum):
    QUOTA = "quota"
    SOFT_ERROR = "soft_error"
    SUCCESS = "success"


@dataclass
class FetchResult:
    """Outcome of a single lookup plus the record to store for it."""

    outcome: FetchOutcome
    record: ClinicRecord

    @property
    def is_fatal(self) -> bool:
        return self.outcome is FetchOutcome.QUOTA
