"""
Overtraining risk assessment.

Combines three signals from the recent workout history into a weighted
score:
- Frequency: runs packed too closely together
- Volume: recent distance well above the longer-term baseline
- Efficiency decline: less speed per heartbeat across recent runs

Each triggered signal adds its weight to the score, and the score is
partitioned into low / medium / high risk.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ..config import AnalysisSettings, get_settings
from ..metrics.efficiency import workout_efficiency
from ..metrics.schedule import mean_gap_days
from ..metrics.stats import linear_trend_slope, mean
from ..models.results import OvertrainingResult, RiskLevel, RiskSignal
from ..models.workout import Workout

RECOMMENDED_REST_DAYS: Dict[RiskLevel, int] = {
    RiskLevel.HIGH: 3,
    RiskLevel.MEDIUM: 2,
    RiskLevel.LOW: 1,
}

INSUFFICIENT_MESSAGE = "Not enough workout data to assess overtraining risk. Keep logging your runs."
ALL_CLEAR_MESSAGE = "Current condition looks good. Keep your routine."

SIGNAL_RECOMMENDATIONS: Dict[RiskSignal, str] = {
    RiskSignal.FREQUENCY: "Reduce training frequency: leave at least one full day between runs.",
    RiskSignal.VOLUME: "Recent distance jumped above your usual volume. Scale back weekly distance.",
    RiskSignal.EFFICIENCY_DECLINE: "Efficiency is dropping across recent runs. Lower intensity and keep runs easy.",
}


def recommended_rest_days(level: RiskLevel) -> int:
    """Rest days for a risk level: high 3, medium 2, low 1."""
    return RECOMMENDED_REST_DAYS[level]


class OvertrainingRiskAssessor:
    """Scores overtraining risk from a newest-first workout history."""

    def __init__(
        self,
        settings: Optional[AnalysisSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._logger = logger or logging.getLogger(__name__)

    def frequency_signal(self, recent: Sequence[Workout]) -> bool:
        """True when the mean gap between recent runs is under the threshold."""
        gap = mean_gap_days(recent)
        if gap is None:
            return False
        return gap < self._settings.frequency_interval_threshold_days

    def volume_signal(
        self,
        recent: Sequence[Workout],
        baseline: Sequence[Workout],
    ) -> bool:
        """True when recent mean distance exceeds the baseline by the spike ratio."""
        recent_distance = mean([w.distance for w in recent if w.distance > 0])
        baseline_distance = mean([w.distance for w in baseline if w.distance > 0])
        if recent_distance is None or not baseline_distance:
            return False
        return recent_distance > baseline_distance * self._settings.volume_spike_ratio

    def efficiency_signal(self, recent: Sequence[Workout]) -> bool:
        """True when per-workout efficiency trends down, oldest to newest."""
        chronological = [workout_efficiency(w) for w in reversed(recent)]
        efficiencies = [e for e in chronological if e is not None]
        if len(efficiencies) < 2:
            return False
        return linear_trend_slope(efficiencies) < -self._settings.efficiency_trend_epsilon

    def score(self, signals: Sequence[RiskSignal]) -> float:
        """Weighted sum of triggered signals."""
        weights = {
            RiskSignal.FREQUENCY: self._settings.frequency_weight,
            RiskSignal.VOLUME: self._settings.volume_weight,
            RiskSignal.EFFICIENCY_DECLINE: self._settings.efficiency_weight,
        }
        return sum(weights[s] for s in signals)

    def classify(self, risk_score: float) -> RiskLevel:
        """Partition a score into a risk level."""
        if risk_score >= self._settings.high_risk_score:
            return RiskLevel.HIGH
        elif risk_score >= self._settings.medium_risk_score:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW

    def assess(self, history: Sequence[Workout]) -> OvertrainingResult:
        """
        Assess overtraining risk.

        Args:
            history: Workouts ordered newest first

        Returns:
            OvertrainingResult (low risk with an insufficient-data notice when
            the history is shorter than the configured minimum)
        """
        if len(history) < self._settings.min_overtraining_workouts:
            self._logger.debug(
                f"Overtraining: {len(history)} workouts, "
                f"need {self._settings.min_overtraining_workouts}"
            )
            return OvertrainingResult(
                level=RiskLevel.LOW,
                recommendations=[INSUFFICIENT_MESSAGE],
                risk_score=0.0,
                recommended_rest_days=recommended_rest_days(RiskLevel.LOW),
                triggered_signals=[],
            )

        window = self._settings.overtraining_window
        recent = list(history[:window])
        baseline = list(history[window:window + self._settings.overtraining_baseline_window])

        signals: List[RiskSignal] = []
        if self.frequency_signal(recent):
            signals.append(RiskSignal.FREQUENCY)
        if self.volume_signal(recent, baseline):
            signals.append(RiskSignal.VOLUME)
        if self.efficiency_signal(recent):
            signals.append(RiskSignal.EFFICIENCY_DECLINE)

        risk_score = self.score(signals)
        level = self.classify(risk_score)
        rest_days = recommended_rest_days(level)

        recommendations = [SIGNAL_RECOMMENDATIONS[s] for s in signals]
        if level != RiskLevel.LOW:
            recommendations.append(
                f"Add recovery: take {rest_days} rest or very easy days before your next hard session."
            )
        if not recommendations:
            recommendations.append(ALL_CLEAR_MESSAGE)

        self._logger.debug(
            f"Overtraining: score={risk_score:.1f} level={level.value} "
            f"signals={[s.value for s in signals]}"
        )

        return OvertrainingResult(
            level=level,
            recommendations=recommendations,
            risk_score=risk_score,
            recommended_rest_days=rest_days,
            triggered_signals=signals,
        )
