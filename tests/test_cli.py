"""Tests for the command line interface."""

import json

import pytest

from fitness_engine.cli import main, parse_assignment, parse_slot
from fitness_engine.exceptions import ValidationError
from fitness_engine.models import GoalCategory


def run_json(capsys, *argv):
    code = main(["--json", *argv])
    return code, json.loads(capsys.readouterr().out)


class TestParsers:
    """Tests for argument parsing helpers."""

    def test_parse_assignment(self):
        assert parse_assignment("cardio=35") == (GoalCategory.CARDIO, 35)

    def test_parse_assignment_bad_value(self):
        with pytest.raises(ValidationError):
            parse_assignment("cardio=lots")

    def test_parse_assignment_missing_equals(self):
        with pytest.raises(ValidationError):
            parse_assignment("cardio")

    def test_parse_slot(self):
        slot = parse_slot("3x8-12")
        assert slot.target_sets == 3
        assert slot.target_reps == "8-12"


class TestCommands:
    """Tests for CLI commands."""

    def test_allocate(self, capsys):
        code, payload = run_json(capsys, "allocate", "--set", "strength=40")
        assert code == 0
        assert payload == {"strength": 40, "hypertrophy": 20, "endurance": 20, "cardio": 20}

    def test_allocate_sequence(self, capsys):
        code, payload = run_json(
            capsys, "allocate", "--set", "strength=100", "--set", "strength=10"
        )
        assert code == 0
        assert payload == {"strength": 10, "hypertrophy": 30, "endurance": 30, "cardio": 30}

    def test_allocate_unknown_category(self, capsys):
        code, payload = run_json(capsys, "allocate", "--set", "yoga=40")
        assert code == 1
        assert payload["error"]["code"] == "UNKNOWN_GOAL_CATEGORY"

    def test_allocate_invalid_start(self, capsys):
        code, payload = run_json(capsys, "allocate", "--strength", "90")
        assert code == 1
        assert payload["error"]["code"] == "INVALID_ALLOCATION"

    def test_activity(self, capsys):
        code, payload = run_json(capsys, "activity", "--completed", "2", "--target", "4")
        assert code == 0
        assert payload == {"activity": 20}

    def test_recovery_never_trained(self, capsys):
        code, payload = run_json(capsys, "recovery", "--never-trained")
        assert code == 0
        assert payload == {"recovery": 62, "zone": "yellow"}

    def test_sleep(self, capsys):
        code, payload = run_json(capsys, "sleep", "--hours", "8")
        assert payload == {"sleep_quality": 1.0}

    def test_progress(self, capsys):
        code, payload = run_json(
            capsys, "progress", "--slot", "3x8-12", "--completed", "30"
        )
        assert payload == {"workout_progress": 1.25}

    def test_progress_without_session(self, capsys):
        code, payload = run_json(capsys, "progress", "--slot", "3x10")
        assert payload == {"workout_progress": None}

    def test_progress_text_without_session(self, capsys):
        assert main(["progress", "--slot", "3x10"]) == 0
        assert "PROGRESS: no session today" in capsys.readouterr().out

    def test_progress_text_nothing_planned(self, capsys):
        assert main(["progress", "--completed", "12"]) == 0
        out = capsys.readouterr().out
        assert "PROGRESS: nothing planned today" in out
        assert "no session" not in out

    def test_text_output(self, capsys):
        assert main(["recovery", "--rest-days", "3", "--sleep", "8", "--rhr", "50"]) == 0
        out = capsys.readouterr().out
        assert "RECOVERY: 88%" in out
        assert "green" in out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out
