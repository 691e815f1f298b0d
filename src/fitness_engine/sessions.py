"""Derive scorer inputs from logged workout sessions."""

from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from .models import WorkoutSession

COMPLETED = "completed"
ACTIVE = "active"


def completed_sessions(sessions: Iterable[WorkoutSession]) -> List[WorkoutSession]:
    """Sessions marked completed that carry a completion time."""
    return [s for s in sessions if s.status == COMPLETED and s.completed_at is not None]


def start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(now: datetime) -> datetime:
    """Monday 00:00 of the week containing ``now`` (keeps tzinfo)."""
    return start_of_day(now) - timedelta(days=now.weekday())


def completed_this_week(sessions: Iterable[WorkoutSession], now: datetime) -> int:
    week_start = start_of_week(now)
    return sum(1 for s in completed_sessions(sessions) if s.completed_at >= week_start)


def last_completed_session(sessions: Iterable[WorkoutSession]) -> Optional[WorkoutSession]:
    completed = completed_sessions(sessions)
    if not completed:
        return None
    return max(completed, key=lambda s: s.completed_at)


def rest_days_since_last_session(
    sessions: Iterable[WorkoutSession],
    now: datetime,
) -> Optional[float]:
    """
    Fractional days since the most recent completed session.

    Only whole elapsed hours count, so 47h59m is 47/24 days.

    Args:
        sessions: Session history
        now: Reference time, same tz-awareness as the session timestamps

    Returns:
        Rest days, or None if no session was ever completed
    """
    last = last_completed_session(sessions)
    if last is None:
        return None
    hours = int((now - last.completed_at).total_seconds() / 3600)
    # Completion stamped ahead of ``now`` (clock skew) counts as just finished
    return max(hours, 0) / 24.0


def todays_session(
    sessions: Iterable[WorkoutSession],
    template_id: Optional[str],
    now: datetime,
) -> Optional[WorkoutSession]:
    """First active or completed session started today for the given template."""
    day_start = start_of_day(now)
    day_end = day_start + timedelta(days=1)
    for session in sessions:
        if (
            day_start <= session.started_at < day_end
            and session.status in (ACTIVE, COMPLETED)
            and session.template_id == template_id
        ):
            return session
    return None
