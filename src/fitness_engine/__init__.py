"""Numeric derivation engine for goal allocation and composite fitness scores."""

from fitness_engine.exceptions import (
    ErrorCode,
    FitnessEngineError,
    ValidationError,
    UnknownGoalCategoryError,
    InvalidAllocationError,
    AllocationInvariantError,
)
from fitness_engine.models import (
    GoalCategory,
    GoalAllocation,
    ScoreInputBundle,
    PlannedExerciseSlot,
    WorkoutSession,
    ExerciseLog,
)
from fitness_engine.allocation import adjust, default_allocation
from fitness_engine.progress import (
    parse_min_reps,
    total_planned_reps,
    completed_reps_for_session,
    workout_progress,
)
from fitness_engine.sleep import sleep_quality
from fitness_engine.recovery import recovery_score, biometric_recovery, recovery_zone
from fitness_engine.activity import activity_score
from fitness_engine.sessions import (
    completed_this_week,
    rest_days_since_last_session,
    todays_session,
)
from fitness_engine.providers import (
    BiometricProvider,
    BiometricReadings,
    gather_biometrics,
    build_input_bundle,
)
from fitness_engine.report import ScoreReport, build_score_report, todays_completed_reps
from fitness_engine.config import EngineSettings, get_settings

__version__ = "0.1.0"

__all__ = [
    "ErrorCode",
    "FitnessEngineError",
    "ValidationError",
    "UnknownGoalCategoryError",
    "InvalidAllocationError",
    "AllocationInvariantError",
    "GoalCategory",
    "GoalAllocation",
    "ScoreInputBundle",
    "PlannedExerciseSlot",
    "WorkoutSession",
    "ExerciseLog",
    # Allocation
    "adjust",
    "default_allocation",
    # Scorers
    "parse_min_reps",
    "total_planned_reps",
    "completed_reps_for_session",
    "workout_progress",
    "sleep_quality",
    "recovery_score",
    "biometric_recovery",
    "recovery_zone",
    "activity_score",
    # Session history
    "completed_this_week",
    "rest_days_since_last_session",
    "todays_session",
    # Gather phase
    "BiometricProvider",
    "BiometricReadings",
    "gather_biometrics",
    "build_input_bundle",
    "ScoreReport",
    "build_score_report",
    "todays_completed_reps",
    "EngineSettings",
    "get_settings",
]
