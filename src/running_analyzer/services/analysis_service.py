"""
Analysis service: the single entry point for the rest of the application.

The service holds no state besides its settings and analyzer instances.
Every call works on the inputs it is given, so one instance can be shared
across threads as long as callers do not mutate the history while it is
being read.
"""

from datetime import datetime
import logging
from typing import List, Optional, Sequence

from ..analysis.cadence import CadenceOptimizer
from ..analysis.efficiency import EfficiencyAnalyzer
from ..analysis.long_term import LongTermTrendAnalyzer
from ..analysis.overtraining import OvertrainingRiskAssessor
from ..analysis.pace_stability import PaceStabilityAnalyzer
from ..analysis.weekly import WeeklySummaryAnalyzer
from ..config import AnalysisSettings, get_settings
from ..metrics.zones import HeartRateZones, heart_rate_zone, karvonen_zones
from ..models.results import (
    CadenceResult,
    EfficiencyResult,
    HistoryAnalysisResult,
    LongTermTrendResult,
    OvertrainingResult,
    PaceStabilityResult,
    StabilityLevel,
    WeeklyStats,
    WorkoutAnalysisResult,
)
from ..models.workout import Workout


class AnalysisService:
    """
    Routes workout data to the analyzers and returns their result records.

    Example:
        service = AnalysisService()
        result = service.analyze_workout(workout)
        risk = service.assess_overtraining_risk(history)
    """

    def __init__(
        self,
        settings: Optional[AnalysisSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._logger = logger or logging.getLogger(__name__)

        self._pace_stability = PaceStabilityAnalyzer(self._settings)
        self._efficiency = EfficiencyAnalyzer(self._settings)
        self._cadence = CadenceOptimizer(self._settings)
        self._overtraining = OvertrainingRiskAssessor(self._settings)
        self._long_term = LongTermTrendAnalyzer(self._settings)
        self._weekly = WeeklySummaryAnalyzer(self._settings)

    @property
    def settings(self) -> AnalysisSettings:
        """Settings shared by all analyzers."""
        return self._settings

    # -------------------------------------------------------------------------
    # Single-run analyses
    # -------------------------------------------------------------------------

    def analyze_pace_stability(self, paces: Sequence[float]) -> PaceStabilityResult:
        """Classify pace consistency from pace readings (sec/km)."""
        return self._pace_stability.analyze(paces)

    def analyze_efficiency(
        self,
        paces: Sequence[float],
        heart_rates: Sequence[float],
    ) -> EfficiencyResult:
        """Efficiency average and trend from index-aligned pace and heart rate."""
        return self._efficiency.analyze(paces, heart_rates)

    def analyze_workout(self, workout: Workout) -> WorkoutAnalysisResult:
        """
        Full analysis of one workout's samples.

        Returns:
            WorkoutAnalysisResult with stability, efficiency, cadence and a
            list of session recommendations
        """
        stability = self._pace_stability.analyze(workout.paces)
        efficiency = self._efficiency.analyze_samples(workout.data_points)
        cadence = self._cadence.optimize_samples(workout.data_points)

        recommendations = self._session_recommendations(stability, efficiency, cadence)

        self._logger.info(
            f"Analyzed workout {workout.id or workout.date.isoformat()}: "
            f"{len(workout.data_points)} samples, stability={stability.level.value}"
        )

        return WorkoutAnalysisResult(
            pace_stability=stability,
            efficiency=efficiency,
            cadence=cadence,
            recommendations=recommendations,
            workout_id=workout.id,
        )

    def _session_recommendations(
        self,
        stability: PaceStabilityResult,
        efficiency: EfficiencyResult,
        cadence: CadenceResult,
    ) -> List[str]:
        recommendations = []

        if stability.level == StabilityLevel.UNSTABLE:
            recommendations.append("Pace varies a lot. Practise holding a steady speed.")
        elif stability.level == StabilityLevel.STABLE:
            recommendations.append("Pace was very steady. Good pacing!")

        if efficiency.sample_count > 0:
            recommendations.append(efficiency.level_recommendation)

        low, high = cadence.optimal_range
        recommendations.append(f"Try to keep your cadence within {low:.0f}-{high:.0f} spm.")
        return recommendations

    def heart_rate_zones(self, max_hr: float, resting_hr: float) -> Optional[HeartRateZones]:
        """Karvonen zone bounds using the configured boundaries."""
        return karvonen_zones(max_hr, resting_hr, self._settings.heart_rate_zone_boundaries)

    def heart_rate_zone(
        self,
        heart_rate: float,
        max_hr: float,
        resting_hr: float,
    ) -> Optional[int]:
        """Zone number (1-5) of a heart rate, or None outside every zone."""
        return heart_rate_zone(
            heart_rate, max_hr, resting_hr, self._settings.heart_rate_zone_boundaries
        )

    # -------------------------------------------------------------------------
    # History analyses (newest-first)
    # -------------------------------------------------------------------------

    def optimize_cadence(self, history: Sequence[Workout]) -> CadenceResult:
        """Optimal cadence band across all samples of the history."""
        return self._cadence.optimize(history)

    def assess_overtraining_risk(self, history: Sequence[Workout]) -> OvertrainingResult:
        """Overtraining risk level, recommendations and rest days."""
        return self._overtraining.assess(history)

    def analyze_long_term_trend(self, history: Sequence[Workout]) -> LongTermTrendResult:
        """Recent-vs-previous efficiency and distance, plus recovery pattern."""
        return self._long_term.analyze(history)

    def weekly_stats(
        self,
        history: Sequence[Workout],
        reference: Optional[datetime] = None,
    ) -> WeeklyStats:
        """Totals for the week ending at ``reference`` (default: latest workout)."""
        return self._weekly.summarize(history, reference)

    def analyze_history(
        self,
        history: Sequence[Workout],
        reference: Optional[datetime] = None,
    ) -> HistoryAnalysisResult:
        """Run every history-level analysis."""
        result = HistoryAnalysisResult(
            overtraining=self.assess_overtraining_risk(history),
            long_term_trend=self.analyze_long_term_trend(history),
            cadence=self.optimize_cadence(history),
            weekly=self.weekly_stats(history, reference),
        )

        self._logger.info(
            f"Analyzed history of {len(history)} workouts: "
            f"risk={result.overtraining.level.value}, "
            f"recovery={result.long_term_trend.recovery_pattern.value}"
        )
        return result
