"""Activity score: 40% weekly workouts, 60% daily movement."""

import math
from typing import Optional

STEP_GOAL = 10000
ACTIVE_ENERGY_GOAL_KCAL = 500
ACTIVE_MINUTES_GOAL = 30

WORKOUT_WEIGHT = 40
MOVEMENT_WEIGHT = 60


def _percent_of_goal(value: float, goal: int) -> int:
    if math.isinf(value):
        return 100 if value > 0 else 0
    return min(int(value) * 100 // max(goal, 1), 100)


def workout_score(completed_this_week: int, target_sessions_per_week: int) -> int:
    """Share of the weekly session target completed, capped at 100."""
    return min(completed_this_week * 100 // max(target_sessions_per_week, 1), 100)


def movement_score(
    steps: Optional[float] = None,
    active_kcal: Optional[float] = None,
    active_minutes: Optional[float] = None,
    step_goal: int = STEP_GOAL,
    active_energy_goal: int = ACTIVE_ENERGY_GOAL_KCAL,
    active_minutes_goal: int = ACTIVE_MINUTES_GOAL,
) -> int:
    """
    Daily movement score from whichever signals the data source returned.

    Each signal is worth up to a third of the score. Missing signals are
    skipped rather than re-weighted, so a day with only steps tops out at 33.
    """
    score = 0
    for value, goal in (
        (steps, step_goal),
        (active_kcal, active_energy_goal),
        (active_minutes, active_minutes_goal),
    ):
        # NaN readings count as missing
        if value is None or math.isnan(value):
            continue
        score += _percent_of_goal(value, goal) // 3
    return score


def activity_score(
    completed_this_week: int,
    target_sessions_per_week: int,
    steps: Optional[float] = None,
    active_kcal: Optional[float] = None,
    active_minutes: Optional[float] = None,
    step_goal: int = STEP_GOAL,
    active_energy_goal: int = ACTIVE_ENERGY_GOAL_KCAL,
    active_minutes_goal: int = ACTIVE_MINUTES_GOAL,
) -> int:
    """
    Calculate the 0-100 activity score.

    Args:
        completed_this_week: Sessions completed since the start of the week
        target_sessions_per_week: Weekly session target from the profile
        steps: Step count today, if available
        active_kcal: Active energy burned today, if available
        active_minutes: Active minutes today, if available
        step_goal: Daily step goal
        active_energy_goal: Daily active energy goal in kcal
        active_minutes_goal: Daily active minutes goal

    Returns:
        Activity score 0-100
    """
    workouts = workout_score(completed_this_week, target_sessions_per_week)
    movement = movement_score(
        steps,
        active_kcal,
        active_minutes,
        step_goal=step_goal,
        active_energy_goal=active_energy_goal,
        active_minutes_goal=active_minutes_goal,
    )

    combined = (workouts * WORKOUT_WEIGHT + movement * MOVEMENT_WEIGHT) // 100
    return max(0, min(100, combined))
