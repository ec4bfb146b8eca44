"""Spacing between workouts."""

from typing import List, Optional, Sequence

from ..models.workout import Workout
from .stats import mean

SECONDS_PER_DAY = 24 * 3600


def gaps_in_days(history: Sequence[Workout]) -> List[float]:
    """
    Days between consecutive workouts of a newest-first history.

    Args:
        history: Workouts ordered newest first

    Returns:
        One gap per adjacent pair (newer minus older), in fractional days
    """
    return [
        (newer.date - older.date).total_seconds() / SECONDS_PER_DAY
        for newer, older in zip(history, history[1:])
    ]


def mean_gap_days(history: Sequence[Workout]) -> Optional[float]:
    """Mean gap in days, or None with fewer than 2 workouts."""
    return mean(gaps_in_days(history))
