"""
Clinic Collector

Main loop: look up each pending clinic, checkpoint after every one, pause
between lookups, and stop for good when the SerpAPI quota runs out.
"""

import time
import logging
from typing import Callable, List, Optional

from ..config import REQUEST_DELAY
from ..models import FetchOutcome, FetchResult, RunState
from .checkpoint import CheckpointStore

logger = logging.getLogger(__name__)


def process_clinic(
    state: RunState,
    index: int,
    clinic_name: str,
    fetcher: Callable[[str], FetchResult],
    store: CheckpointStore,
) -> FetchResult:
    """Fetch one clinic, append its record and checkpoint. Returns the fetch result."""
    result = fetcher(clinic_name)

    if result.outcome is not FetchOutcome.SUCCESS:
        logger.error(f"  [!] {clinic_name}: {result.record.error}")

    state.results.append(result.record)
    state.last_index = index + 1
    store.save(state)

    return result


def run_clinics(
    clinics: List[str],
    fetcher: Callable[[str], FetchResult],
    store: CheckpointStore,
    delay: float = REQUEST_DELAY,
    resume: bool = True,
    state: Optional[RunState] = None,
) -> RunState:
    """
    Process every clinic not yet covered by the checkpoint.

    Args:
        clinics: Clinic names in input order
        fetcher: Callable doing one lookup per name
        store: Checkpoint store used to restore and persist state
        delay: Pause after each processed clinic (seconds)
        resume: Restore state from the store; if False, start from index 0
        state: Explicit starting state (overrides resume)

    Returns:
        Final RunState. ``halted`` is True when the quota ran out.
    """
    if state is None:
        state = store.load_state() if resume else RunState()

    total = len(clinics)

    for i in range(state.last_index, total):
        clinic_name = clinics[i]
        logger.info(f"Scraping ({i + 1}/{total}): {clinic_name}")

        result = process_clinic(state, i, clinic_name, fetcher, store)

        if result.is_fatal:
            logger.error("SerpAPI quota exhausted. Stopping; rerun to resume.")
            state.halted = True
            break

        time.sleep(delay)

    logger.info("Scraping finished")
    return state
