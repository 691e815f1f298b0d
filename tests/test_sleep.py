"""Tests for sleep quality scoring."""

import pytest

from fitness_engine.sleep import (
    hrv_score,
    resting_hr_score,
    sleep_duration_score,
    sleep_quality,
)


class TestSleepDurationScore:
    """Tests for the piecewise duration score."""

    @pytest.mark.parametrize("hours", [7.0, 8.0, 9.0])
    def test_plateau(self, hours):
        assert sleep_duration_score(hours) == 100.0

    def test_slightly_short(self):
        assert sleep_duration_score(6.5) == pytest.approx(70.0)

    def test_slightly_long(self):
        assert sleep_duration_score(9.5) == pytest.approx(95.0)

    def test_short(self):
        assert sleep_duration_score(5.0) == pytest.approx(60.0)

    def test_very_short_floors_at_zero(self):
        assert sleep_duration_score(1.0) == 0.0

    def test_long(self):
        assert sleep_duration_score(11.0) == pytest.approx(80.0)

    def test_very_long_floors_at_zero(self):
        assert sleep_duration_score(20.0) == 0.0


class TestBiometricSubScores:
    """Tests for HRV and resting HR sub-scores."""

    def test_hrv_breakpoints(self):
        assert hrv_score(70) == 100.0
        assert hrv_score(55) == 90.0
        assert hrv_score(45) == 70.0
        assert hrv_score(30) == 50.0
        assert hrv_score(0) == 20.0

    def test_resting_hr_breakpoints(self):
        assert resting_hr_score(50) == 100.0
        assert resting_hr_score(58) == 84.0
        assert resting_hr_score(62) == 76.0
        assert resting_hr_score(68) == 64.0
        assert resting_hr_score(80) == 40.0
        assert resting_hr_score(120) == 0.0


class TestSleepQuality:
    """Tests for sleep_quality function."""

    def test_duration_only_returns_exact_ratio(self):
        """8 hours with no biometrics is exactly 1.0."""
        assert sleep_quality(8.0) == 1.0

    def test_duration_only_short(self):
        assert sleep_quality(6.5) == pytest.approx(0.7)

    def test_no_sleep_returns_none(self):
        assert sleep_quality(0) is None
        assert sleep_quality(-1.0) is None
        assert sleep_quality(None) is None

    def test_all_factors_perfect(self):
        assert sleep_quality(8.0, hrv=65, resting_hr=52) == pytest.approx(1.0)

    def test_hrv_only_is_not_renormalised(self):
        """Duration weighs 50% and HRV 25%; the missing HR slot stays empty."""
        # 100 * 0.5 + 70 * 0.25 = 67.5
        assert sleep_quality(8.0, hrv=45) == pytest.approx(0.675)

    def test_resting_hr_only(self):
        # 100 * 0.5 + 76 * 0.25 = 69
        assert sleep_quality(7.5, resting_hr=62) == pytest.approx(0.69)

    def test_poor_night_with_biometrics(self):
        # 60 * 0.5 + 50 * 0.25 + 40 * 0.25 = 52.5
        assert sleep_quality(5.0, hrv=30, resting_hr=80) == pytest.approx(0.525)

    def test_result_bounded(self):
        for hours in [0.5, 3, 6, 7, 9, 10, 14, 24]:
            for hrv in [None, 0, 45, 200]:
                for rhr in [None, 30, 65, 150]:
                    score = sleep_quality(hours, hrv=hrv, resting_hr=rhr)
                    assert 0.0 <= score <= 1.0
