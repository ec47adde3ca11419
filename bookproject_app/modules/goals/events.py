"""
Goal event subscribers.
Recomputes the snapshot after a save so the log shows where the new goal stands.
"""
import logging

from flask import current_app

from bookproject_app.core.signals import goal_deleted, goal_saved
from bookproject_app.utils.time_utils import user_today

logger = logging.getLogger(__name__)


def handle_goal_saved(sender, **kwargs):
    from .services.progress_service import GoalProgressService

    user_id = kwargs.get('user_id')
    if not user_id:
        return

    year = kwargs.get('year')
    today = user_today()
    if year and year != today.year:
        return

    snapshot = GoalProgressService.build_progress(user_id, today=today)
    if snapshot is None:
        current_app.logger.warning("Goal saved for user %s but no current goal found", user_id)
        return

    logger.info(
        "User %s goal now %s/%s %s (%s by %s)",
        user_id,
        snapshot.completed_count,
        snapshot.target,
        snapshot.goal_type.value,
        snapshot.schedule_direction.value,
        snapshot.schedule_delta,
    )


def handle_goal_deleted(sender, **kwargs):
    logger.info("User %s cleared the reading goal for %s", kwargs.get('user_id'), kwargs.get('year'))


def init_goal_events():
    goal_saved.connect(handle_goal_saved)
    goal_deleted.connect(handle_goal_deleted)
