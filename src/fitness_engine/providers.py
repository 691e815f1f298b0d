"""Gather phase: collect biometric readings ahead of a scoring pass.

The scorers are pure and synchronous. Anything that touches a health data
source lives here, behind the narrow ``BiometricProvider`` protocol, so the
caller can plug in HealthKit, Garmin, a test double or anything else.
"""

import asyncio
import logging
from dataclasses import dataclass, asdict
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, Optional, Protocol

from pydantic import ValidationError as PydanticValidationError

from .config import get_settings
from .models import ScoreInputBundle, WorkoutSession
from .sessions import (
    completed_sessions,
    completed_this_week,
    rest_days_since_last_session,
    start_of_day,
)

logger = logging.getLogger(__name__)


class BiometricProvider(Protocol):
    """Read-only access to a health data source.

    Every read returns None when the source has no data for the window.
    Reads may raise; a failed read is treated the same as missing data.
    """

    async def get_steps(self, start: datetime, end: datetime) -> Optional[int]: ...

    async def get_active_energy(self, start: datetime, end: datetime) -> Optional[float]: ...

    async def get_active_minutes(self, start: datetime, end: datetime) -> Optional[int]: ...

    async def get_sleep_hours(self, start: datetime, end: datetime) -> Optional[float]: ...

    async def get_resting_heart_rate(self) -> Optional[float]: ...

    async def get_latest_hrv(self) -> Optional[float]: ...


@dataclass
class BiometricReadings:
    """Readings from one gather pass; None means missing or failed."""
    steps: Optional[int] = None
    active_energy_kcal: Optional[float] = None
    active_minutes: Optional[int] = None
    sleep_hours: Optional[float] = None
    resting_heart_rate: Optional[float] = None
    heart_rate_variability: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _unwrap(name: str, result: Any) -> Any:
    if isinstance(result, BaseException):
        if not isinstance(result, Exception):
            raise result
        logger.warning("Biometric read '%s' failed: %s", name, result)
        return None
    return _validate(name, result)


def _validate(name: str, value: Any) -> Any:
    """Check a reading against its bundle field; out-of-range readings count as missing."""
    if value is None:
        return None
    try:
        checked = ScoreInputBundle(**{name: value})
    except PydanticValidationError as e:
        logger.warning(
            "Biometric read '%s' rejected (%r): %s", name, value, e.errors()[0]["msg"]
        )
        return None
    return getattr(checked, name)


async def gather_biometrics(
    provider: BiometricProvider,
    now: Optional[datetime] = None,
) -> BiometricReadings:
    """
    Fetch all biometric signals concurrently.

    Movement signals cover today so far; sleep covers yesterday's calendar
    day. Resting HR and HRV are the latest samples.

    Args:
        provider: Health data source
        now: Reference time (defaults to the current local time)

    Returns:
        BiometricReadings with None for every read that failed or had no data
    """
    now = now or datetime.now()
    today = start_of_day(now)
    yesterday = today - timedelta(days=1)

    reads = {
        "steps": provider.get_steps(today, now),
        "active_energy_kcal": provider.get_active_energy(today, now),
        "active_minutes": provider.get_active_minutes(today, now),
        "sleep_hours": provider.get_sleep_hours(yesterday, today),
        "resting_heart_rate": provider.get_resting_heart_rate(),
        "heart_rate_variability": provider.get_latest_hrv(),
    }
    results = await asyncio.gather(*reads.values(), return_exceptions=True)

    readings = {name: _unwrap(name, result) for name, result in zip(reads, results)}
    logger.debug("Gathered biometrics: %s", readings)
    return BiometricReadings(**readings)


async def build_input_bundle(
    provider: BiometricProvider,
    sessions: Iterable[WorkoutSession],
    target_sessions_per_week: Optional[int] = None,
    now: Optional[datetime] = None,
) -> ScoreInputBundle:
    """Gather biometrics and session history into a single scoring snapshot.

    Without a weekly target the configured default is used.
    """
    now = now or datetime.now()
    if target_sessions_per_week is None:
        target_sessions_per_week = get_settings().default_sessions_per_week
    sessions = list(sessions)
    readings = await gather_biometrics(provider, now)

    return ScoreInputBundle(
        target_sessions_per_week=target_sessions_per_week,
        completed_this_week=completed_this_week(sessions, now),
        rest_days_since_last_session=rest_days_since_last_session(sessions, now),
        has_any_completed_session=bool(completed_sessions(sessions)),
        **readings.to_dict(),
    )
