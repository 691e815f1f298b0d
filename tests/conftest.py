"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from fitness_engine.config import get_settings
from fitness_engine.models import ExerciseLog, PlannedExerciseSlot, WorkoutSession


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def now():
    """Wednesday mid-morning."""
    return datetime(2024, 1, 17, 10, 0)


@pytest.fixture
def sessions():
    """Session history around the reference week of 2024-01-15."""
    return [
        # Previous week
        WorkoutSession(
            id="s1", status="completed", template_id="push",
            started_at=datetime(2024, 1, 12, 17, 0),
            completed_at=datetime(2024, 1, 12, 18, 0),
        ),
        # This week
        WorkoutSession(
            id="s2", status="completed", template_id="pull",
            started_at=datetime(2024, 1, 15, 7, 0),
            completed_at=datetime(2024, 1, 15, 8, 0),
        ),
        # Abandoned, never completed
        WorkoutSession(
            id="s3", status="cancelled", template_id="legs",
            started_at=datetime(2024, 1, 16, 7, 0),
        ),
        # Open today
        WorkoutSession(
            id="s4", status="active", template_id="push",
            started_at=datetime(2024, 1, 17, 9, 30),
        ),
    ]


@pytest.fixture
def planned_slots():
    return [
        PlannedExerciseSlot(target_sets=3, target_reps="8-12", exercise_name="Bench Press"),
        PlannedExerciseSlot(target_sets=4, target_reps="10", exercise_name="Row"),
    ]


@pytest.fixture
def exercise_logs():
    return [
        ExerciseLog(session_id="s4", reps=10, completed=True),
        ExerciseLog(session_id="s4", reps=8, completed=True),
        ExerciseLog(session_id="s4", reps=12, completed=False),
        ExerciseLog(session_id="s4", reps=None, completed=True),
        ExerciseLog(session_id="s2", reps=20, completed=True),
    ]
