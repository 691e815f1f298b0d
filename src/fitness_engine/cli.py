#!/usr/bin/env python3
"""
Fitness Engine CLI.

Run the allocation engine and scorers from the command line.

Usage:
    fitness-engine allocate --set strength=40
    fitness-engine activity --completed 2 --target 4 --steps 8000
    fitness-engine recovery --rest-days 1.5 --sleep 7 --rhr 58
    fitness-engine sleep --hours 7.5 --hrv 55
    fitness-engine progress --slot 3x8-12 --slot 4x10 --completed 40
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from .activity import activity_score
from .allocation import adjust
from .config import get_settings
from .exceptions import FitnessEngineError, ValidationError
from .models import GoalAllocation, GoalCategory, PlannedExerciseSlot
from .progress import total_planned_reps, workout_progress
from .recovery import recovery_score, recovery_zone
from .sleep import sleep_quality


# ANSI color codes
class Colors:
    RED = "\033[91m"
    YELLOW = "\033[93m"
    GREEN = "\033[92m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def get_zone_color(zone: str) -> str:
    colors = {
        "green": Colors.GREEN,
        "yellow": Colors.YELLOW,
        "red": Colors.RED,
    }
    return colors.get(zone, Colors.RESET)


def parse_assignment(text: str) -> Tuple[GoalCategory, int]:
    """Parse 'strength=40' into (GoalCategory.STRENGTH, 40)."""
    name, sep, value = text.partition("=")
    if not sep:
        raise ValidationError(f"Expected CATEGORY=VALUE, got '{text}'", field="set")
    try:
        return GoalCategory.parse(name), int(value)
    except ValueError:
        raise ValidationError(f"Weight must be an integer, got '{value}'", field="set") from None


def parse_slot(text: str) -> PlannedExerciseSlot:
    """Parse '3x8-12' into a planned slot with 3 sets of '8-12'."""
    sets, sep, reps = text.partition("x")
    if not sep:
        raise ValidationError(f"Expected SETSxREPS, got '{text}'", field="slot")
    try:
        return PlannedExerciseSlot(target_sets=int(sets), target_reps=reps)
    except ValueError:
        raise ValidationError(f"Set count must be an integer, got '{sets}'", field="slot") from None


def _emit(args, payload: dict, lines: List[str]) -> None:
    if args.json:
        print(json.dumps(payload))
        return
    for line in lines:
        print(line)


def cmd_allocate(args) -> None:
    """Apply allocation edits in order."""
    allocation = GoalAllocation(
        strength=args.strength,
        hypertrophy=args.hypertrophy,
        endurance=args.endurance,
        cardio=args.cardio,
    )
    for assignment in args.set or []:
        category, value = parse_assignment(assignment)
        allocation = adjust(allocation, category, value)

    lines = [f"{Colors.BOLD}Goal allocation{Colors.RESET}"]
    for name, value in allocation.to_dict().items():
        lines.append(f"  {name:<12} {value:>3}%")
    _emit(args, allocation.to_dict(), lines)


def cmd_activity(args) -> None:
    settings = get_settings()
    target = args.target if args.target is not None else settings.default_sessions_per_week
    score = activity_score(
        args.completed,
        target,
        steps=args.steps,
        active_kcal=args.kcal,
        active_minutes=args.minutes,
        step_goal=settings.step_goal,
        active_energy_goal=settings.active_energy_goal_kcal,
        active_minutes_goal=settings.active_minutes_goal,
    )
    _emit(args, {"activity": score}, [f"ACTIVITY: {score}%"])


def cmd_recovery(args) -> None:
    score = recovery_score(
        args.rest_days,
        not args.never_trained,
        sleep_hours=args.sleep,
        resting_hr=args.rhr,
    )
    zone = recovery_zone(score)
    color = get_zone_color(zone)
    _emit(
        args,
        {"recovery": score, "zone": zone},
        [f"{color}RECOVERY: {score}%{Colors.RESET} ({zone})"],
    )


def cmd_sleep(args) -> None:
    score = sleep_quality(args.hours, hrv=args.hrv, resting_hr=args.rhr)
    if score is None:
        line = "SLEEP: no data"
    else:
        line = f"SLEEP: {round(score * 100)}%"
    _emit(args, {"sleep_quality": score}, [line])


def cmd_progress(args) -> None:
    slots = [parse_slot(s) for s in args.slot or []]
    progress = workout_progress(slots, args.completed)
    if total_planned_reps(slots) == 0:
        line = "PROGRESS: nothing planned today"
    elif progress is None:
        line = "PROGRESS: no session today"
    else:
        line = f"PROGRESS: {args.completed}/{total_planned_reps(slots)} reps ({progress:.0%})"
    _emit(args, {"workout_progress": progress}, [line])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fitness Engine CLI")
    parser.add_argument("--json", action="store_true", help="Print JSON output")

    subparsers = parser.add_subparsers(dest="command")

    # Allocate
    alloc_p = subparsers.add_parser("allocate", help="Rebalance goal allocation")
    for category in GoalCategory:
        alloc_p.add_argument(f"--{category.value}", type=int, default=25)
    alloc_p.add_argument(
        "--set", "-s", action="append", metavar="CATEGORY=VALUE",
        help="Edit one category (repeatable, applied in order)",
    )

    # Activity
    act_p = subparsers.add_parser("activity", help="Activity score")
    act_p.add_argument("--completed", "-c", type=int, default=0, help="Sessions this week")
    act_p.add_argument("--target", "-t", type=int, help="Weekly session target")
    act_p.add_argument("--steps", type=int)
    act_p.add_argument("--kcal", type=float, help="Active energy (kcal)")
    act_p.add_argument("--minutes", type=int, help="Active minutes")

    # Recovery
    rec_p = subparsers.add_parser("recovery", help="Recovery score")
    rec_p.add_argument("--rest-days", "-r", type=float, default=0.0)
    rec_p.add_argument("--never-trained", action="store_true", help="No completed sessions yet")
    rec_p.add_argument("--sleep", type=float, help="Sleep hours")
    rec_p.add_argument("--rhr", type=float, help="Resting heart rate")

    # Sleep
    sleep_p = subparsers.add_parser("sleep", help="Sleep quality")
    sleep_p.add_argument("--hours", type=float, required=True)
    sleep_p.add_argument("--hrv", type=float)
    sleep_p.add_argument("--rhr", type=float)

    # Progress
    prog_p = subparsers.add_parser("progress", help="Workout progress")
    prog_p.add_argument("--slot", action="append", metavar="SETSxREPS")
    prog_p.add_argument("--completed", type=int, help="Reps logged today")

    return parser


COMMANDS = {
    "allocate": cmd_allocate,
    "activity": cmd_activity,
    "recovery": cmd_recovery,
    "sleep": cmd_sleep,
    "progress": cmd_progress,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_settings().log_level.upper())

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        handler(args)
    except FitnessEngineError as e:
        if args.json:
            print(json.dumps(e.to_dict()))
        else:
            print(f"{Colors.RED}Error: {e.message}{Colors.RESET}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
