"""Configuration settings for the fitness engine."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .activity import ACTIVE_ENERGY_GOAL_KCAL, ACTIVE_MINUTES_GOAL, STEP_GOAL


# __file__ = src/fitness_engine/config.py
PACKAGE_ROOT = Path(__file__).parent
PROJECT_ROOT = PACKAGE_ROOT.parent.parent


class EngineSettings(BaseSettings):
    """Engine settings loaded from FITNESS_ENGINE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FITNESS_ENGINE_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Daily movement goals
    step_goal: int = STEP_GOAL
    active_energy_goal_kcal: int = ACTIVE_ENERGY_GOAL_KCAL
    active_minutes_goal: int = ACTIVE_MINUTES_GOAL

    # Used when the profile has no weekly target yet
    default_sessions_per_week: int = 3

    log_level: str = "INFO"


@lru_cache
def get_settings() -> EngineSettings:
    """Get cached settings instance."""
    return EngineSettings()
