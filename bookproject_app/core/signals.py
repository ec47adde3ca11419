"""
Central signal registry.

Usage:
    # Publisher
    from bookproject_app.core.signals import goal_saved
    goal_saved.send(None, user_id=1, goal_id=2, ...)

    # Subscriber (in a module's events.py)
    goal_saved.connect(on_goal_saved)
"""
from blinker import Namespace

goal_signals = Namespace()

# Signal: Fired after a reading goal is created or replaced
# Payload: user_id, goal_id, goal_type, target, year
goal_saved = goal_signals.signal('goal_saved')

# Signal: Fired after the current reading goal is removed
# Payload: user_id, year
goal_deleted = goal_signals.signal('goal_deleted')
