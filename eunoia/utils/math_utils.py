"""Percentage helpers shared by every achievement rule"""
import math

PROGRESS_MIN = 0.0
PROGRESS_MAX = 100.0


def normalize_progress(value: float) -> float:
    """
    Clamp a raw percentage to [0, 100]

    NaN and negative values become 0; anything past the threshold becomes 100.

    Examples:
        normalize_progress(99.9) → 99.9
        normalize_progress(500.0) → 100.0
        normalize_progress(-3) → 0.0
    """
    if math.isnan(value):
        return PROGRESS_MIN
    return max(PROGRESS_MIN, min(float(value), PROGRESS_MAX))


def calculate_percentage(current: float, target: float) -> float:
    """
    Percentage of `target` reached by `current`, clamped to [0, 100]

    A non-positive target has nothing left to reach and counts as complete.
    """
    if target <= 0:
        return PROGRESS_MAX
    return normalize_progress(current * 100.0 / target)
