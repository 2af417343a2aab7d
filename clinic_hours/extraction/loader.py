"""
Input Loader

Reads clinic names from a CSV file with a header row.
"""

import csv
import logging
from typing import Dict, List, Optional

from ..config import NAME_COLUMN_ALIASES
from ..exceptions import InputFileError, NoInputError

logger = logging.getLogger(__name__)


def pick_clinic_name(row: Dict[str, Optional[str]]) -> Optional[str]:
    """Return the trimmed clinic name from a row, probing header aliases in order."""
    for alias in NAME_COLUMN_ALIASES:
        value = row.get(alias)
        if value and value.strip():
            return value.strip()
    return None


def load_clinic_names(csv_path: str) -> List[str]:
    """
    Load every clinic name from the input CSV, in file order.

    Duplicate names are kept as separate work items. The list is only
    returned once the whole file has been read.

    Args:
        csv_path: Path to the input CSV

    Returns:
        Ordered list of trimmed, non-empty clinic names

    Raises:
        InputFileError: If the file cannot be opened or parsed
        NoInputError: If no row carries a clinic name
    """
    clinics = []

    try:
        with open(csv_path, 'r', newline='', encoding='utf-8-sig') as f:
            for row in csv.DictReader(f):
                name = pick_clinic_name(row)
                if name:
                    clinics.append(name)
    except OSError as e:
        raise InputFileError(f"Cannot read input file {csv_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise InputFileError(f"{csv_path} is not valid UTF-8 (re-save it as UTF-8): {e}") from e
    except csv.Error as e:
        raise InputFileError(f"Malformed CSV in {csv_path}: {e}") from e

    logger.info(f"Loaded {len(clinics)} clinics")

    if not clinics:
        raise NoInputError(f"No clinic names found in {csv_path}")

    return clinics
