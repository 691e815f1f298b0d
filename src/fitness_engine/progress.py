"""Today's workout completion fraction."""

import logging
from typing import Iterable, Optional, Sequence

from .models import ExerciseLog, PlannedExerciseSlot

logger = logging.getLogger(__name__)

DEFAULT_MIN_REPS = 10


def parse_min_reps(reps: str) -> int:
    """
    Minimum rep count of a target reps expression.

    "8-12" -> 8, "10" -> 10, anything unparseable -> 10.
    """
    text = (reps or "").strip()

    if "-" in text:
        parts = [p for p in text.split("-") if p]
        if len(parts) == 2:
            try:
                return int(parts[0].strip())
            except ValueError:
                pass

    try:
        return int(text)
    except ValueError:
        logger.debug("Unparseable reps %r, using %d", reps, DEFAULT_MIN_REPS)
        return DEFAULT_MIN_REPS


def total_planned_reps(slots: Iterable[PlannedExerciseSlot]) -> int:
    return sum(slot.target_sets * parse_min_reps(slot.target_reps) for slot in slots)


def completed_reps_for_session(logs: Iterable[ExerciseLog], session_id: str) -> int:
    """Sum reps of completed sets logged in a session; sets without reps are skipped."""
    return sum(
        log.reps
        for log in logs
        if log.session_id == session_id and log.completed and log.reps is not None
    )


def workout_progress(
    planned_slots: Optional[Sequence[PlannedExerciseSlot]],
    completed_reps: Optional[int],
) -> Optional[float]:
    """
    Fraction of today's planned reps that have been logged.

    Args:
        planned_slots: Exercises in today's template, or None if nothing is planned
        completed_reps: Reps logged in today's session, or None if no session is open

    Returns:
        completed / planned, uncapped (1.25 means 25% over plan), or None
        when there is no plan or no session today
    """
    if not planned_slots:
        return None

    planned = total_planned_reps(planned_slots)
    if planned == 0:
        return None

    if completed_reps is None:
        return None

    return completed_reps / planned
