"""Trailing-week totals."""

import logging
from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..config import AnalysisSettings, get_settings
from ..models.results import WeeklyStats
from ..models.workout import Workout, to_utc
from .long_term import average_efficiency


class WeeklySummaryAnalyzer:
    """Distance, count and efficiency for the workouts of the trailing week."""

    def __init__(
        self,
        settings: Optional[AnalysisSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._logger = logger or logging.getLogger(__name__)

    def summarize(
        self,
        history: Sequence[Workout],
        reference: Optional[datetime] = None,
    ) -> WeeklyStats:
        """
        Summarize the workouts dated within the window ending at ``reference``.

        Args:
            history: Workouts in any order
            reference: End of the window (naive values are read as UTC);
                defaults to the latest workout date

        Returns:
            WeeklyStats (all zeros for an empty history)
        """
        if not history:
            return WeeklyStats(total_distance=0.0, workout_count=0, average_efficiency=0.0)

        end = to_utc(reference) if reference else max(w.date for w in history)
        start = end - timedelta(days=self._settings.weekly_window_days)
        week = [w for w in history if start <= w.date <= end]

        self._logger.debug(f"Weekly summary: {len(week)} workouts between {start} and {end}")

        return WeeklyStats(
            total_distance=sum(w.distance for w in week),
            workout_count=len(week),
            average_efficiency=average_efficiency(week),
        )
