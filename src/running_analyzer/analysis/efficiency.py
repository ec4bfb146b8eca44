"""
Aerobic efficiency analysis.

Efficiency index = speed (km/h) / heart rate (bpm). Rising efficiency over
a run or a block of runs means more speed for the same cardiac effort.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from ..config import AnalysisSettings, get_settings
from ..metrics.efficiency import paired_efficiencies, sample_efficiencies
from ..metrics.stats import classify_trend, linear_trend_slope, mean
from ..models.results import EfficiencyResult, TrendDirection
from ..models.workout import Sample

IMPROVING_MESSAGE = "Efficiency is improving. Keep your current training load."
DECLINING_MESSAGE = "Efficiency is declining. Consider more easy aerobic volume."
STABLE_MESSAGE = "Efficiency is stable."
INSUFFICIENT_MESSAGE = "Not enough paired pace and heart rate data to assess efficiency."

LOW_LEVEL_MESSAGE = "Speed per heartbeat is low. Add more aerobic base training."
HIGH_LEVEL_MESSAGE = "Efficiency is excellent. You can start increasing distance."
NORMAL_LEVEL_MESSAGE = "Efficiency is in a good range. Keep it up."


class EfficiencyAnalyzer:
    """Computes per-sample efficiency, its average and its trend."""

    def __init__(
        self,
        settings: Optional[AnalysisSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._logger = logger or logging.getLogger(__name__)

    def trend_recommendation(self, direction: TrendDirection) -> str:
        """Advice based on the efficiency trend."""
        if direction == TrendDirection.IMPROVING:
            return IMPROVING_MESSAGE
        elif direction == TrendDirection.DECLINING:
            return DECLINING_MESSAGE
        return STABLE_MESSAGE

    def level_recommendation(self, average_efficiency: float) -> str:
        """
        Advice based on the absolute efficiency level.

        Bands (configurable): below 0.05 needs more aerobic work, above 0.08
        is ready for more distance.
        """
        if average_efficiency < self._settings.efficiency_low_threshold:
            return LOW_LEVEL_MESSAGE
        elif average_efficiency > self._settings.efficiency_high_threshold:
            return HIGH_LEVEL_MESSAGE
        return NORMAL_LEVEL_MESSAGE

    def analyze(
        self,
        paces: Sequence[float],
        heart_rates: Sequence[float],
    ) -> EfficiencyResult:
        """
        Analyze efficiency from index-aligned pace and heart-rate readings.

        Pairs missing either reading are dropped before any division. If the
        sequences differ in length, the extra trailing readings are ignored.

        Args:
            paces: Pace readings in sec/km, time-ascending
            heart_rates: Heart-rate readings in bpm, time-ascending

        Returns:
            EfficiencyResult
        """
        return self._from_series(paired_efficiencies(paces, heart_rates))

    def analyze_samples(self, samples: Iterable[Sample]) -> EfficiencyResult:
        """Analyze efficiency from time-ascending samples."""
        return self._from_series(sample_efficiencies(samples))

    def _from_series(self, efficiencies: List[float]) -> EfficiencyResult:
        if not efficiencies:
            self._logger.debug("Efficiency: no valid pace/heart rate pairs")
            return EfficiencyResult(
                average_efficiency=0.0,
                trend=0.0,
                recommendation=INSUFFICIENT_MESSAGE,
                trend_direction=TrendDirection.STABLE,
                level_recommendation=INSUFFICIENT_MESSAGE,
                sample_count=0,
            )

        average_efficiency = mean(efficiencies) or 0.0
        trend = linear_trend_slope(efficiencies)
        direction = classify_trend(trend, self._settings.efficiency_trend_epsilon)

        self._logger.debug(
            f"Efficiency: avg={average_efficiency:.4f} trend={trend:.5f} "
            f"direction={direction.value} samples={len(efficiencies)}"
        )

        return EfficiencyResult(
            average_efficiency=average_efficiency,
            trend=trend,
            recommendation=self.trend_recommendation(direction),
            trend_direction=direction,
            level_recommendation=self.level_recommendation(average_efficiency),
            sample_count=len(efficiencies),
        )
