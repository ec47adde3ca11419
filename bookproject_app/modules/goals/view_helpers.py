"""Presentation helpers mapping a ProgressSnapshot to the text shown on the goal page."""

from __future__ import annotations

from typing import Optional

from .constants import DIRECTION_LABELS, GOAL_TYPE_CONFIG, ScheduleDirection
from .schemas import ProgressSnapshot

GOAL_NOT_SET = 'Reading goal not set'
GOAL_MET = 'Congratulations for reaching your target!'
NO_WEEKS_LEFT = 'There are no weeks left this year to reach your goal'


def progress_color_class(fraction: float) -> str:
    """Return CSS class suffix for the progress bar."""
    if fraction >= 1:
        return 'success'
    if fraction >= 0.75:
        return 'info'
    if fraction >= 0.4:
        return 'primary'
    if fraction > 0:
        return 'warning'
    return 'secondary'


def unit_label(goal_type, count) -> str:
    """Unit word for ``count`` items of ``goal_type`` ("1 book", "2 books")."""
    config = GOAL_TYPE_CONFIG[goal_type.value]
    return config['unit_singular'] if count == 1 else config['unit']


def format_percentage(fraction: float) -> str:
    return f'{fraction * 100:.2f}% completed'


def schedule_text(snapshot: ProgressSnapshot) -> str:
    if snapshot.schedule_direction is ScheduleDirection.MET:
        return GOAL_MET
    unit = unit_label(snapshot.goal_type, snapshot.schedule_delta)
    label = DIRECTION_LABELS[snapshot.schedule_direction]
    return f'You are {snapshot.schedule_delta} {unit} {label} schedule'


def pace_text(snapshot: ProgressSnapshot) -> Optional[str]:
    if snapshot.is_met:
        return None
    if snapshot.weekly_pace_needed is None:
        return NO_WEEKS_LEFT
    pace = int(snapshot.weekly_pace_needed)
    return f'You need to read {pace} {unit_label(snapshot.goal_type, pace)} a week on average to achieve your goal'


def build_goal_display(snapshot: Optional[ProgressSnapshot]) -> dict[str, object]:
    """Return the serialisable view model for the goal page."""
    if snapshot is None:
        return {
            'has_goal': False,
            'heading': GOAL_NOT_SET,
            'button_label': 'Set goal',
        }

    unit = unit_label(snapshot.goal_type, snapshot.target)
    return {
        'has_goal': True,
        'heading': f'You have read {snapshot.completed_count} out of {snapshot.target} {unit}',
        'button_label': 'Update goal',
        'progress_value': snapshot.fraction,
        'percentage_text': format_percentage(snapshot.fraction),
        'schedule_text': schedule_text(snapshot),
        'pace_text': pace_text(snapshot),
        'color': progress_color_class(snapshot.fraction),
    }
