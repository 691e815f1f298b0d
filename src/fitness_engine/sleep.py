"""Sleep quality score (0.0-1.0).

Sleep duration carries the score on its own. When HRV or resting heart rate
is available the duration is down-weighted to 50% and each biometric adds
up to 25%.
"""

from typing import Optional

DURATION_WEIGHT = 0.5
HRV_WEIGHT = 0.25
RESTING_HR_WEIGHT = 0.25


def sleep_duration_score(hours: float) -> float:
    """Piecewise 0-100 score peaking on the 7-9 hour plateau."""
    if 7.0 <= hours <= 9.0:
        return 100.0
    if 6.0 <= hours < 7.0:
        return 80.0 - (7.0 - hours) * 20.0
    if 9.0 < hours <= 10.0:
        return 100.0 - (hours - 9.0) * 10.0
    if hours < 6.0:
        return max(0.0, 80.0 - (6.0 - hours) * 20.0)
    return max(0.0, 90.0 - (hours - 10.0) * 10.0)


def hrv_score(hrv_ms: float) -> float:
    """0-100 score for overnight HRV; 60 ms and above is full marks."""
    if hrv_ms >= 60:
        return 100.0
    if hrv_ms >= 50:
        return 80.0 + (hrv_ms - 50) * 2.0
    if hrv_ms >= 40:
        return 60.0 + (hrv_ms - 40) * 2.0
    return max(0.0, 40.0 + (hrv_ms - 20) * 1.0)


def resting_hr_score(bpm: float) -> float:
    """0-100 score for resting heart rate (lower is better)."""
    if bpm <= 55:
        return 100.0
    if bpm <= 60:
        return 90.0 - (bpm - 55) * 2.0
    if bpm <= 65:
        return 80.0 - (bpm - 60) * 2.0
    if bpm <= 70:
        return 70.0 - (bpm - 65) * 2.0
    return max(0.0, 60.0 - (bpm - 70) * 2.0)


def sleep_quality(
    sleep_hours: Optional[float],
    hrv: Optional[float] = None,
    resting_hr: Optional[float] = None,
) -> Optional[float]:
    """
    Calculate sleep quality for last night.

    Args:
        sleep_hours: Hours slept
        hrv: Latest HRV in ms, if the data source has one
        resting_hr: Resting heart rate in bpm, if available

    Returns:
        Score in [0.0, 1.0], or None if no sleep was recorded
    """
    if sleep_hours is None or sleep_hours <= 0:
        return None

    duration = sleep_duration_score(sleep_hours)

    if hrv is None and resting_hr is None:
        return duration / 100.0

    score = duration * DURATION_WEIGHT
    if hrv is not None:
        score += hrv_score(hrv) * HRV_WEIGHT
    if resting_hr is not None:
        score += resting_hr_score(resting_hr) * RESTING_HR_WEIGHT

    return min(1.0, max(0.0, score / 100.0))
