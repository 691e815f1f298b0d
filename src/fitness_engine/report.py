"""Compose every score for one input bundle."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Sequence

from .activity import activity_score
from .config import EngineSettings, get_settings
from .models import ExerciseLog, PlannedExerciseSlot, ScoreInputBundle, WorkoutSession
from .progress import completed_reps_for_session, workout_progress
from .recovery import recovery_score, recovery_zone
from .sessions import todays_session
from .sleep import sleep_quality


@dataclass
class ScoreReport:
    """All composite scores for one scoring pass."""
    activity: int                      # 0-100
    recovery: int                      # 0-100
    sleep_quality: Optional[float]     # 0.0-1.0, None without sleep data
    workout_progress: Optional[float]  # uncapped, None without a plan/session

    @property
    def recovery_zone(self) -> str:
        return recovery_zone(self.recovery)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "activity": self.activity,
            "recovery": self.recovery,
            "recovery_zone": self.recovery_zone,
            "sleep_quality": (
                round(self.sleep_quality, 3) if self.sleep_quality is not None else None
            ),
            "workout_progress": (
                round(self.workout_progress, 3) if self.workout_progress is not None else None
            ),
        }


def build_score_report(
    bundle: ScoreInputBundle,
    planned_slots: Optional[Sequence[PlannedExerciseSlot]] = None,
    completed_reps: Optional[int] = None,
    settings: Optional[EngineSettings] = None,
) -> ScoreReport:
    """
    Run every scorer once against the same snapshot.

    Args:
        bundle: Scoring snapshot
        planned_slots: Today's planned exercises, if a template is scheduled
        completed_reps: Reps logged in today's session, if one is open
        settings: Goal configuration (defaults to environment settings)

    Returns:
        ScoreReport
    """
    settings = settings or get_settings()

    activity = activity_score(
        bundle.completed_this_week,
        bundle.target_sessions_per_week,
        steps=bundle.steps,
        active_kcal=bundle.active_energy_kcal,
        active_minutes=bundle.active_minutes,
        step_goal=settings.step_goal,
        active_energy_goal=settings.active_energy_goal_kcal,
        active_minutes_goal=settings.active_minutes_goal,
    )
    recovery = recovery_score(
        bundle.rest_days_since_last_session,
        bundle.has_any_completed_session,
        sleep_hours=bundle.sleep_hours,
        resting_hr=bundle.resting_heart_rate,
    )
    sleep = sleep_quality(
        bundle.sleep_hours,
        hrv=bundle.heart_rate_variability,
        resting_hr=bundle.resting_heart_rate,
    )

    return ScoreReport(
        activity=activity,
        recovery=recovery,
        sleep_quality=sleep,
        workout_progress=workout_progress(planned_slots, completed_reps),
    )


def todays_completed_reps(
    sessions: Iterable[WorkoutSession],
    logs: Iterable[ExerciseLog],
    template_id: Optional[str],
    now: datetime,
) -> Optional[int]:
    """Reps logged today against the scheduled template; None without a session today."""
    session = todays_session(sessions, template_id, now)
    if session is None:
        return None
    return completed_reps_for_session(logs, session.id)
