from .goal_service import GoalService
from .progress_service import GoalProgressService

__all__ = ['GoalService', 'GoalProgressService']
