"""
Goal Service
Persistence of the user's yearly reading goal ('reading_goals' table).
"""

from __future__ import annotations

from typing import Optional

from flask import current_app

from bookproject_app.core.error_handlers import ValidationError
from bookproject_app.core.signals import goal_deleted, goal_saved
from bookproject_app.db_instance import db
from bookproject_app.models import ReadingGoal

from ..constants import GoalType


class GoalService:

    @staticmethod
    def find_current_goal(user_id: int, year: int) -> Optional[ReadingGoal]:
        return ReadingGoal.query.filter_by(user_id=user_id, year=year).first()

    @staticmethod
    def save_goal(user_id: int, goal_type, target: int, year: int) -> ReadingGoal:
        """
        Create or replace the goal for ``year``.
        Commits and emits ``goal_saved``.
        """
        try:
            goal_type = GoalType(goal_type)
        except ValueError:
            raise ValidationError('Unknown goal type', errors={'goal_type': [str(goal_type)]})

        try:
            target = int(target)
        except (TypeError, ValueError):
            raise ValidationError('Target must be a whole number', errors={'target': [str(target)]})
        if target < 1:
            raise ValidationError('Target must be a positive number', errors={'target': [target]})

        goal = GoalService.find_current_goal(user_id, year)
        if goal is None:
            goal = ReadingGoal(user_id=user_id, year=year)
            db.session.add(goal)

        goal.goal_type = goal_type.value
        goal.target = target

        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            current_app.logger.exception("Failed to save reading goal for user %s", user_id)
            raise

        current_app.logger.info(
            "Saved reading goal %s for user %s: %s %s in %s",
            goal.goal_id, user_id, goal.target, goal.goal_type, year,
        )
        goal_saved.send(
            'goal_service',
            user_id=user_id,
            goal_id=goal.goal_id,
            goal_type=goal.goal_type,
            target=goal.target,
            year=year,
        )
        return goal

    @staticmethod
    def delete_goal(user_id: int, year: int) -> bool:
        """Remove the goal for ``year``. Returns False when there was none."""
        goal = GoalService.find_current_goal(user_id, year)
        if goal is None:
            return False

        db.session.delete(goal)
        db.session.commit()
        current_app.logger.info("Removed reading goal for user %s in %s", user_id, year)
        goal_deleted.send('goal_service', user_id=user_id, year=year)
        return True
