"""
Long-term progress trend.

Compares the most recent block of workouts with the block before it and
labels the typical spacing between recent runs.
"""

import logging
from typing import Optional, Sequence

from ..config import AnalysisSettings, get_settings
from ..metrics.efficiency import workout_efficiency
from ..metrics.schedule import mean_gap_days
from ..metrics.stats import mean
from ..models.results import LongTermTrendResult, RecoveryPattern
from ..models.workout import Workout


def average_efficiency(workouts: Sequence[Workout]) -> float:
    """Mean per-workout efficiency, skipping workouts without usable readings."""
    values = [e for e in (workout_efficiency(w) for w in workouts) if e is not None]
    return mean(values) or 0.0


def average_distance(workouts: Sequence[Workout]) -> float:
    """Mean workout distance in km; 0 for an empty block."""
    return mean([w.distance for w in workouts]) or 0.0


class LongTermTrendAnalyzer:
    """Recent-vs-previous comparison over a newest-first history."""

    def __init__(
        self,
        settings: Optional[AnalysisSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._logger = logger or logging.getLogger(__name__)

    def classify_interval(self, average_gap_days: float) -> RecoveryPattern:
        """
        Bucket a mean gap (days) into a recovery pattern.

        Default edges: [0,1) daily, [1,2) every other day, [2,3) two-day gap,
        [3,5) three to four day gap, [5,inf) irregular.
        """
        daily, every_other, two_day, three_four = self._settings.recovery_bucket_edges
        if average_gap_days < daily:
            return RecoveryPattern.DAILY
        elif average_gap_days < every_other:
            return RecoveryPattern.EVERY_OTHER_DAY
        elif average_gap_days < two_day:
            return RecoveryPattern.TWO_DAY_GAP
        elif average_gap_days < three_four:
            return RecoveryPattern.THREE_TO_FOUR_DAY_GAP
        return RecoveryPattern.IRREGULAR

    def recovery_pattern(self, history: Sequence[Workout]) -> RecoveryPattern:
        """Recovery pattern across the most recent workouts."""
        required = self._settings.min_recovery_workouts
        if len(history) < required:
            return RecoveryPattern.INSUFFICIENT_DATA

        gap = mean_gap_days(history[:self._settings.trend_recent_window])
        if gap is None:
            return RecoveryPattern.INSUFFICIENT_DATA
        return self.classify_interval(gap)

    def analyze(self, history: Sequence[Workout]) -> LongTermTrendResult:
        """
        Compare recent and previous blocks of workouts.

        Args:
            history: Workouts ordered newest first

        Returns:
            LongTermTrendResult; zeros with an insufficient-data pattern when
            the history is shorter than the configured minimum
        """
        if len(history) < self._settings.min_trend_workouts:
            self._logger.debug(
                f"Long-term trend: {len(history)} workouts, "
                f"need {self._settings.min_trend_workouts}"
            )
            return LongTermTrendResult(
                efficiency_improvement=0.0,
                distance_improvement=0.0,
                recovery_pattern=RecoveryPattern.INSUFFICIENT_DATA,
            )

        recent_size = self._settings.trend_recent_window
        recent = history[:recent_size]
        previous = history[recent_size:recent_size + self._settings.trend_previous_window]

        recent_efficiency = average_efficiency(recent)
        previous_efficiency = average_efficiency(previous)
        if previous_efficiency > 0:
            efficiency_improvement = (
                (recent_efficiency - previous_efficiency) / previous_efficiency * 100
            )
        else:
            efficiency_improvement = 0.0

        distance_improvement = average_distance(recent) - average_distance(previous)
        pattern = self.recovery_pattern(history)

        self._logger.debug(
            f"Long-term trend: efficiency {efficiency_improvement:+.1f}%, "
            f"distance {distance_improvement:+.2f} km, pattern={pattern.value}"
        )

        return LongTermTrendResult(
            efficiency_improvement=efficiency_improvement,
            distance_improvement=distance_improvement,
            recovery_pattern=pattern,
        )
