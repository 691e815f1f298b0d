"""Goal allocation redistribution.

Keeps the four training-goal weights summing to 100 when the user drags one
of them. The edited weight takes the requested value and the other three are
scaled proportionally to their previous values to absorb the difference.
"""

import logging
import math
from typing import Dict, List, Union

from .exceptions import AllocationInvariantError, ValidationError
from .models import ALLOCATION_TOTAL, GoalAllocation, GoalCategory

logger = logging.getLogger(__name__)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def _clamp(value: int, low: int = 0, high: int = ALLOCATION_TOTAL) -> int:
    return max(low, min(high, value))


def default_allocation() -> GoalAllocation:
    """Even 25/25/25/25 split used for new profiles."""
    return GoalAllocation()


def _redistribute(values: Dict[str, int], others: List[GoalCategory], target_total: int) -> None:
    """Scale ``others`` in place so that they sum to ``target_total``."""
    other_total = sum(values[c.value] for c in others)
    if other_total == target_total:
        return

    if other_total == 0:
        # Nothing to scale from: split evenly, earlier categories take the remainder
        share, remainder = divmod(target_total, len(others))
        for index, category in enumerate(others):
            values[category.value] = share + (1 if index < remainder else 0)
        return

    needed = target_total - other_total
    adjustments = [
        round_half_away_from_zero(values[c.value] / other_total * needed)
        for c in others
    ]
    # Whole rounding error goes to the last category
    adjustments[-1] += needed - sum(adjustments)

    for category, adjustment in zip(others, adjustments):
        values[category.value] = _clamp(values[category.value] + adjustment)


def adjust(
    current: GoalAllocation,
    changed: Union[str, GoalCategory],
    requested: Union[int, float],
) -> GoalAllocation:
    """Set one goal weight and rebalance the other three.

    Args:
        current: Allocation before the edit
        changed: Category the user edited
        requested: Requested weight; clamped to [0, 100]

    Returns:
        New allocation summing to 100. ``current`` itself is returned when
        the clamped request equals the existing weight.

    Raises:
        UnknownGoalCategoryError: If ``changed`` is not a known category
        ValidationError: If ``requested`` is NaN
        AllocationInvariantError: If the result does not sum to 100
    """
    category = GoalCategory.parse(changed)
    if math.isnan(requested):
        raise ValidationError("Requested weight must be a number", field="requested")
    # Clamp before rounding so infinite requests land on a bound
    requested = max(0.0, min(float(ALLOCATION_TOTAL), requested))
    clamped = _clamp(round_half_away_from_zero(requested))

    if clamped == current.get(category):
        return current

    values = current.to_dict()
    values[category.value] = clamped
    others = [c for c in GoalCategory if c is not category]

    _redistribute(values, others, ALLOCATION_TOTAL - clamped)

    residual = ALLOCATION_TOTAL - sum(values.values())
    if residual:
        logger.debug(
            "Allocation off by %d after redistribution, correcting %s",
            residual, category.value,
        )
        values[category.value] = _clamp(values[category.value] + residual)
        residual = ALLOCATION_TOTAL - sum(values.values())

    if residual:
        # Edited weight is pinned at 0 or 100; walk the others from the back
        logger.debug(
            "%s pinned at %d, pushing residual %d to other categories",
            category.value, values[category.value], residual,
        )
        for other in reversed(others):
            before = values[other.value]
            values[other.value] = _clamp(before + residual)
            residual -= values[other.value] - before
            if not residual:
                break

    if sum(values.values()) != ALLOCATION_TOTAL or any(
        v < 0 or v > ALLOCATION_TOTAL for v in values.values()
    ):
        raise AllocationInvariantError(values)

    return GoalAllocation(**values)
