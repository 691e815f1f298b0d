"""Tests for score report composition and the input bundle."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from fitness_engine.config import EngineSettings, get_settings
from fitness_engine.models import PlannedExerciseSlot, ScoreInputBundle
from fitness_engine.report import build_score_report, todays_completed_reps


class TestScoreInputBundle:
    """Tests for the scoring snapshot model."""

    def test_defaults_leave_biometrics_absent(self):
        bundle = ScoreInputBundle()
        assert bundle.steps is None
        assert bundle.sleep_hours is None
        assert bundle.has_any_completed_session is False

    def test_frozen(self):
        bundle = ScoreInputBundle(steps=100)
        with pytest.raises(PydanticValidationError):
            bundle.steps = 200

    def test_rejects_negative_counts(self):
        with pytest.raises(PydanticValidationError):
            ScoreInputBundle(completed_this_week=-1)

    def test_default_target_is_three(self):
        assert ScoreInputBundle().target_sessions_per_week == 3

    def test_default_target_from_settings(self, monkeypatch):
        monkeypatch.setenv("FITNESS_ENGINE_DEFAULT_SESSIONS_PER_WEEK", "5")
        assert ScoreInputBundle().target_sessions_per_week == 5

    def test_rejects_non_finite_readings(self):
        with pytest.raises(PydanticValidationError):
            ScoreInputBundle(sleep_hours=float("nan"))


class TestBuildScoreReport:
    """Tests for build_score_report function."""

    def test_new_user_without_data(self):
        report = build_score_report(ScoreInputBundle())
        assert report.activity == 0
        assert report.recovery == 62
        assert report.recovery_zone == "yellow"
        assert report.sleep_quality is None
        assert report.workout_progress is None

    def test_full_snapshot(self):
        bundle = ScoreInputBundle(
            target_sessions_per_week=3,
            completed_this_week=3,
            rest_days_since_last_session=3.0,
            has_any_completed_session=True,
            steps=10000,
            active_energy_kcal=500,
            active_minutes=30,
            sleep_hours=8.0,
            resting_heart_rate=50,
            heart_rate_variability=65,
        )
        slots = [PlannedExerciseSlot(target_sets=3, target_reps="8-12")]
        report = build_score_report(bundle, planned_slots=slots, completed_reps=30)

        assert report.activity == 99
        assert report.recovery == 88
        assert report.sleep_quality == pytest.approx(1.0)
        assert report.workout_progress == 1.25
        assert report.to_dict() == {
            "activity": 99,
            "recovery": 88,
            "recovery_zone": "green",
            "sleep_quality": 1.0,
            "workout_progress": 1.25,
        }

    def test_settings_goals_applied(self):
        bundle = ScoreInputBundle(target_sessions_per_week=3, steps=5000)
        settings = EngineSettings(step_goal=5000)
        # (0*40 + 33*60) / 100 = 19.8
        assert build_score_report(bundle, settings=settings).activity == 19

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("FITNESS_ENGINE_STEP_GOAL", "5000")
        assert get_settings().step_goal == 5000
        bundle = ScoreInputBundle(steps=5000)
        assert build_score_report(bundle).activity == 19


class TestTodaysCompletedReps:
    """Tests for todays_completed_reps function."""

    def test_open_session_for_template(self, sessions, exercise_logs, now):
        assert todays_completed_reps(sessions, exercise_logs, "push", now) == 18

    def test_no_session_for_template(self, sessions, exercise_logs, now):
        assert todays_completed_reps(sessions, exercise_logs, "legs", now) is None

    def test_feeds_workout_progress(self, sessions, exercise_logs, planned_slots, now):
        completed = todays_completed_reps(sessions, exercise_logs, "push", now)
        report = build_score_report(
            ScoreInputBundle(), planned_slots=planned_slots, completed_reps=completed
        )
        assert report.workout_progress == pytest.approx(18 / 64)
