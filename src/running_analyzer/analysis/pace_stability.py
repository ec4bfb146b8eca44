"""Pace stability classification from the coefficient of variation."""

import logging
from typing import Optional, Sequence

from ..config import AnalysisSettings, get_settings
from ..metrics.stats import coefficient_of_variation
from ..models.results import PaceStabilityResult, StabilityLevel

STABLE_MESSAGE = "Pace is steady. Good pacing!"
MODERATE_MESSAGE = "Pace is slightly uneven."
UNSTABLE_MESSAGE = "Pace varies widely. Consider practising even pacing."
INSUFFICIENT_MESSAGE = "Not enough pace data to assess stability."


class PaceStabilityAnalyzer:
    """
    Classifies how consistent a run's pace was.

    Thresholds (CV in %, configurable):
    - cv < 5: stable
    - 5 <= cv <= 15: moderate
    - cv > 15: unstable
    """

    def __init__(
        self,
        settings: Optional[AnalysisSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._logger = logger or logging.getLogger(__name__)

    def classify(self, cv: float) -> StabilityLevel:
        """Map a CV percentage to a stability level."""
        if cv < self._settings.stability_stable_cv:
            return StabilityLevel.STABLE
        elif cv <= self._settings.stability_unstable_cv:
            return StabilityLevel.MODERATE
        else:
            return StabilityLevel.UNSTABLE

    def analyze(self, paces: Sequence[float]) -> PaceStabilityResult:
        """
        Analyze pace consistency.

        Args:
            paces: Pace readings in sec/km; 0 entries are treated as absent

        Returns:
            PaceStabilityResult (insufficient_data when fewer than the
            minimum number of valid paces remain)
        """
        valid_paces = [p for p in paces if p > 0]

        if len(valid_paces) < self._settings.min_pace_samples:
            self._logger.debug(
                f"Pace stability: {len(valid_paces)} valid paces, "
                f"need {self._settings.min_pace_samples}"
            )
            return PaceStabilityResult(
                cv=0.0,
                level=StabilityLevel.INSUFFICIENT_DATA,
                warning=INSUFFICIENT_MESSAGE,
                sample_count=len(valid_paces),
            )

        cv = coefficient_of_variation(valid_paces)
        level = self.classify(cv)

        if level == StabilityLevel.STABLE:
            warning = STABLE_MESSAGE
        elif level == StabilityLevel.MODERATE:
            warning = MODERATE_MESSAGE
        else:
            warning = UNSTABLE_MESSAGE

        self._logger.debug(f"Pace stability: cv={cv:.1f}% level={level.value}")

        return PaceStabilityResult(
            cv=cv,
            level=level,
            warning=warning,
            sample_count=len(valid_paces),
        )
