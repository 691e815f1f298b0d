"""
Recovery Score Calculation

Combines two halves into a 0-100 recovery score:
- Rest time since the last completed session (step function)
- Biometric recovery: sleep and resting heart rate blended into a neutral
  baseline, then pulled toward the rest-intensity bucket

The biometric blend is chained: every step blends into the running value,
so the order sleep -> resting HR -> rest intensity is significant. All
arithmetic is integer and truncating.
"""

from typing import Optional

NEUTRAL_RECOVERY = 50
# Rest days used when the user has never completed a session
NO_SESSION_REST_DAYS = 999.0

GREEN_THRESHOLD = 67
YELLOW_THRESHOLD = 34


def _clamp_score(value: int) -> int:
    return max(0, min(100, value))


def base_recovery(rest_days: float) -> int:
    """Recovery from rest time alone."""
    if rest_days >= 3:
        return 100
    if rest_days >= 2:
        return 85
    if rest_days >= 1:
        return 60
    if rest_days >= 0.5:
        return 30
    return 10


def sleep_bucket(sleep_hours: float) -> int:
    if sleep_hours >= 7.5:
        return 100
    if sleep_hours >= 6:
        return 80
    if sleep_hours >= 5:
        return 60
    return 40


def resting_hr_bucket(bpm: float) -> int:
    """Lower resting HR means better recovery (normal range ~50-70)."""
    if bpm <= 55:
        return 100
    if bpm <= 60:
        return 85
    if bpm <= 65:
        return 70
    if bpm <= 70:
        return 55
    return 40


def rest_intensity_bucket(rest_days: float) -> int:
    """Target the score drifts toward given how recently the user trained."""
    if rest_days < 1:
        return 30
    if rest_days < 2:
        return 60
    return 90


def biometric_recovery(
    rest_days: float,
    sleep_hours: Optional[float] = None,
    resting_hr: Optional[float] = None,
) -> int:
    """
    Biometric half of the recovery score.

    Args:
        rest_days: Days since the last completed session
        sleep_hours: Last night's sleep, if available
        resting_hr: Resting heart rate in bpm, if available

    Returns:
        Score 0-100
    """
    score = NEUTRAL_RECOVERY

    # Sleep: 30%
    if sleep_hours is not None:
        score = (score * 70 + sleep_bucket(sleep_hours) * 30) // 100

    # Resting heart rate: 20%
    if resting_hr is not None:
        score = (score * 80 + resting_hr_bucket(resting_hr) * 20) // 100

    # Recent training: 30%
    score = (score * 70 + rest_intensity_bucket(rest_days) * 30) // 100

    return _clamp_score(score)


def recovery_score(
    rest_days: Optional[float],
    has_any_completed_session: bool,
    sleep_hours: Optional[float] = None,
    resting_hr: Optional[float] = None,
) -> int:
    """
    Calculate the 0-100 recovery score.

    Without any completed session only the biometric half is used, with
    rest time treated as fully rested. Otherwise rest time and biometrics
    are weighted 50/50.

    Args:
        rest_days: Fractional days since the last completed session
        has_any_completed_session: False if the user never finished a session
        sleep_hours: Last night's sleep, if available
        resting_hr: Resting heart rate in bpm, if available

    Returns:
        Recovery score 0-100
    """
    if not has_any_completed_session or rest_days is None:
        return biometric_recovery(NO_SESSION_REST_DAYS, sleep_hours, resting_hr)

    base = base_recovery(rest_days)
    biometric = biometric_recovery(rest_days, sleep_hours, resting_hr)

    combined = (base * 50 + biometric * 50) // 100
    return _clamp_score(min(100, combined))


def recovery_zone(score: int) -> str:
    """Traffic-light zone for a recovery score: 'green', 'yellow' or 'red'."""
    if score >= GREEN_THRESHOLD:
        return "green"
    if score >= YELLOW_THRESHOLD:
        return "yellow"
    return "red"
