"""
Gamification for Eunoia journaling

This package derives motivation features from a user's journal history:
- Streaks (longest historical run, current-streak counter rule)
- Achievements with unlock status and progress
"""

from eunoia.gamification.streak_system import (
    longest_consecutive_day_run,
    advance_current_streak,
)
from eunoia.gamification.achievement_system import (
    ACHIEVEMENTS,
    evaluate,
    get_achievement,
)

__all__ = [
    "longest_consecutive_day_run",
    "advance_current_streak",
    "ACHIEVEMENTS",
    "evaluate",
    "get_achievement",
]
