"""
Stateless calculation logic for reading goal progress.
Pure functions, no database or clock dependencies: the caller supplies the week number.
"""

from __future__ import annotations

import math
from typing import Optional

from ..constants import WEEKS_IN_YEAR, GoalType, ScheduleDirection
from ..schemas import ProgressSnapshot, ScheduleStatus


def compute_fraction(target: int, completed: int) -> float:
    """Share of the target already read, capped at 1.0. A zero target gives 0.0."""
    if target == 0:
        return 0.0
    return min(completed / target, 1.0)


def weeks_remaining(current_week: int, total_weeks_in_year: int = WEEKS_IN_YEAR) -> int:
    return total_weeks_in_year - current_week


def expected_pace_by_now(target: int, current_week: int, total_weeks_in_year: int = WEEKS_IN_YEAR) -> int:
    """Units that should be read by ``current_week`` on a linear schedule.

    The weekly rate is rounded up before it is multiplied by the week number,
    so small targets overstate the expected count (a target of 10 expects 5
    books by week 5).
    """
    return math.ceil(target / total_weeks_in_year) * current_week


def schedule_status(
    target: int,
    completed: int,
    current_week: int,
    total_weeks_in_year: int = WEEKS_IN_YEAR,
) -> ScheduleStatus:
    if completed >= target:
        return ScheduleStatus(direction=ScheduleDirection.MET, delta=0)

    expected = expected_pace_by_now(target, current_week, total_weeks_in_year)
    direction = ScheduleDirection.BEHIND if completed < expected else ScheduleDirection.AHEAD
    return ScheduleStatus(direction=direction, delta=abs(expected - completed))


def weekly_pace_needed(target: int, completed: int, weeks_left: int) -> Optional[float]:
    """Units per week needed to finish on time.

    Returns 0 once the goal is met and None when no weeks are left
    (pace undefined).
    """
    if completed >= target:
        return 0
    if weeks_left <= 0:
        return None
    return math.ceil((target - completed) / weeks_left)


def build_snapshot(
    goal_type: GoalType,
    target: int,
    completed: int,
    current_week: int,
    total_weeks_in_year: int = WEEKS_IN_YEAR,
) -> ProgressSnapshot:
    """Compose the calculator outputs into a ProgressSnapshot."""
    weeks_left = weeks_remaining(current_week, total_weeks_in_year)
    status = schedule_status(target, completed, current_week, total_weeks_in_year)

    return ProgressSnapshot(
        goal_type=GoalType(goal_type),
        target=target,
        completed_count=completed,
        fraction=compute_fraction(target, completed),
        current_week=current_week,
        weeks_remaining=weeks_left,
        weekly_pace_needed=weekly_pace_needed(target, completed, weeks_left),
        schedule_delta=status.delta,
        schedule_direction=status.direction,
    )
