from dataclasses import asdict, dataclass
from typing import Optional

from .constants import GoalType, ScheduleDirection


@dataclass(frozen=True)
class ScheduleStatus:
    direction: ScheduleDirection
    delta: int = 0


@dataclass(frozen=True)
class ProgressSnapshot:
    """Progress against a reading goal at one point in time. Derived, never stored."""

    goal_type: GoalType
    target: int
    completed_count: int
    fraction: float
    current_week: int
    weeks_remaining: int
    weekly_pace_needed: Optional[float]
    schedule_delta: int
    schedule_direction: ScheduleDirection

    @property
    def is_met(self) -> bool:
        return self.schedule_direction is ScheduleDirection.MET

    @property
    def percent(self) -> float:
        return self.fraction * 100

    def to_dict(self) -> dict:
        data = asdict(self)
        data['goal_type'] = self.goal_type.value
        data['schedule_direction'] = self.schedule_direction.value
        data['percent'] = round(self.percent, 2)
        return data
