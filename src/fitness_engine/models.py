"""Data models shared by the allocation engine and the scorers."""

from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import get_settings
from .exceptions import InvalidAllocationError, UnknownGoalCategoryError


ALLOCATION_TOTAL = 100


# =============================================================================
# Goal allocation
# =============================================================================

class GoalCategory(str, Enum):
    """Training emphasis categories, in fixed redistribution order."""
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"
    CARDIO = "cardio"

    @classmethod
    def parse(cls, value: Union[str, "GoalCategory"]) -> "GoalCategory":
        """Resolve a category from its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        # Older onboarding builds called hypertrophy "volume"
        if name == "volume":
            return cls.HYPERTROPHY
        try:
            return cls(name)
        except ValueError:
            raise UnknownGoalCategoryError(str(value)) from None


@dataclass(frozen=True)
class GoalAllocation:
    """Four-way percentage split of training emphasis.

    Always sums to 100 with every weight in [0, 100]. Instances are
    immutable; use ``allocation.adjust`` to derive an edited copy.
    """
    strength: int = 25
    hypertrophy: int = 25
    endurance: int = 25
    cardio: int = 25

    def __post_init__(self) -> None:
        values = self.to_dict()
        for name, value in values.items():
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidAllocationError(
                    f"Allocation weight '{name}' must be an integer", values
                )
            if value < 0 or value > ALLOCATION_TOTAL:
                raise InvalidAllocationError(
                    f"Allocation weight '{name}' out of range: {value}", values
                )
        if sum(values.values()) != ALLOCATION_TOTAL:
            raise InvalidAllocationError(
                f"Allocation must sum to {ALLOCATION_TOTAL}, got {sum(values.values())}",
                values,
            )

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> "GoalAllocation":
        """Build an allocation from a name -> weight mapping."""
        values = {}
        for key, value in data.items():
            values[GoalCategory.parse(key).value] = value
        missing = [c.value for c in GoalCategory if c.value not in values]
        if missing:
            raise InvalidAllocationError(
                f"Allocation is missing categories: {', '.join(missing)}"
            )
        return cls(**values)

    def get(self, category: Union[str, GoalCategory]) -> int:
        return getattr(self, GoalCategory.parse(category).value)

    @property
    def total(self) -> int:
        return self.strength + self.hypertrophy + self.endurance + self.cardio

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


# =============================================================================
# Score inputs
# =============================================================================

def _default_sessions_per_week() -> int:
    return get_settings().default_sessions_per_week


class ScoreInputBundle(BaseModel):
    """Read-only snapshot of everything a single scoring pass needs.

    Biometric fields are ``None`` when the data source had nothing for the
    window. ``None`` changes how a scorer weights its signals; it is never
    read as zero.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    target_sessions_per_week: int = Field(
        default_factory=_default_sessions_per_week, ge=0, description="Weekly session target"
    )
    completed_this_week: int = Field(0, ge=0, description="Sessions completed since start of week")
    rest_days_since_last_session: Optional[float] = Field(
        None, ge=0, description="Fractional days since the last completed session"
    )
    has_any_completed_session: bool = Field(
        False, description="Whether the user has ever completed a session"
    )

    steps: Optional[int] = Field(None, ge=0, description="Step count today")
    active_energy_kcal: Optional[float] = Field(None, ge=0, description="Active energy today")
    active_minutes: Optional[int] = Field(None, ge=0, description="Active minutes today")
    sleep_hours: Optional[float] = Field(None, ge=0, le=24, description="Sleep last night")
    resting_heart_rate: Optional[float] = Field(None, gt=0, description="Resting HR in bpm")
    heart_rate_variability: Optional[float] = Field(None, ge=0, description="HRV (SDNN) in ms")


# =============================================================================
# Workout records
# =============================================================================

@dataclass(frozen=True)
class PlannedExerciseSlot:
    """One planned exercise in today's template."""
    target_sets: int
    target_reps: str  # "8", "8-12", or free text
    exercise_name: str = ""


@dataclass(frozen=True)
class WorkoutSession:
    """The subset of a logged workout session the engine reads."""
    id: str
    status: str  # 'active', 'completed', 'cancelled'
    started_at: datetime
    completed_at: Optional[datetime] = None
    template_id: Optional[str] = None


@dataclass(frozen=True)
class ExerciseLog:
    """A single logged set inside a session."""
    session_id: str
    reps: Optional[int] = None
    completed: bool = False
