"""Shared configuration for reading goals."""

from __future__ import annotations

from enum import Enum

WEEKS_IN_YEAR = 52


class GoalType(str, Enum):
    BOOKS = 'BOOKS'
    PAGES = 'PAGES'


class ScheduleDirection(str, Enum):
    BEHIND = 'BEHIND'
    AHEAD = 'AHEAD'
    MET = 'MET'


GOAL_TYPE_CONFIG: dict[str, dict[str, str]] = {
    GoalType.BOOKS.value: {
        'label': 'Books',
        'unit': 'books',
        'unit_singular': 'book',
    },
    GoalType.PAGES.value: {
        'label': 'Pages',
        'unit': 'pages',
        'unit_singular': 'page',
    },
}

GOAL_TYPE_CHOICES: list[tuple[str, str]] = [
    (key, config['label']) for key, config in GOAL_TYPE_CONFIG.items()
]

# Wording used on the schedule line ("You are 3 books behind schedule")
DIRECTION_LABELS: dict[ScheduleDirection, str] = {
    ScheduleDirection.BEHIND: 'behind',
    ScheduleDirection.AHEAD: 'ahead of',
}
