"""
Goal Progress Service
Gathers the inputs of the progress calculation (goal, read shelf, calendar)
and validates them before calling the pure calculator.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from flask import current_app

from bookproject_app.core.error_handlers import ValidationError
from bookproject_app.utils.time_utils import user_today, week_of_calendar_year

from ...shelves.services import PredefinedShelfService
from ..constants import WEEKS_IN_YEAR, GoalType
from ..logics.calculation import build_snapshot
from ..schemas import ProgressSnapshot
from .goal_service import GoalService


class GoalProgressService:

    @staticmethod
    def build_progress(user_id: int, today: Optional[date] = None, user=None) -> Optional[ProgressSnapshot]:
        """
        Snapshot of the user's progress for the year of ``today``.
        Returns None when no goal is set for that year.
        """
        today = today or user_today(user)
        goal = GoalService.find_current_goal(user_id, today.year)
        if goal is None:
            return None

        completed = PredefinedShelfService.completed_this_year(user_id, today.year, goal.goal_type)
        total_weeks = current_app.config.get('WEEKS_IN_YEAR', WEEKS_IN_YEAR)
        current_week = week_of_calendar_year(today, total_weeks)

        return GoalProgressService.compute(goal.goal_type, goal.target, completed, current_week)

    @staticmethod
    def compute(goal_type, target: int, completed: int, current_week: int) -> ProgressSnapshot:
        """Validate the raw inputs and run the calculator."""
        errors = {}
        if target is None or target < 0:
            errors['target'] = [target]
        if completed is None or completed < 0:
            errors['completed'] = [completed]
        if current_week is None or current_week < 0:
            errors['current_week'] = [current_week]
        if errors:
            raise ValidationError('Progress inputs must be non-negative', errors=errors)

        total_weeks = current_app.config.get('WEEKS_IN_YEAR', WEEKS_IN_YEAR)
        current_app.logger.debug(
            "Goal progress inputs: target=%s completed=%s week=%s/%s",
            target, completed, current_week, total_weeks,
        )
        return build_snapshot(GoalType(goal_type), target, completed, current_week, total_weeks)
