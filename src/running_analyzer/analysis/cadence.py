"""
Cadence optimization.

Finds the cadence band at which a runner produced their best observed
efficiency. Readings are kept together as (pace, cadence, heart rate)
triples per sample so that values are never paired across different
instants or workouts.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import AnalysisSettings, get_settings
from ..metrics.efficiency import efficiency_index
from ..metrics.stats import mean, percentile
from ..models.results import CadenceResult
from ..models.workout import Sample, Workout


@dataclass(frozen=True)
class CadenceReading:
    """One sample with cadence, pace and heart rate all recorded."""

    cadence: float
    efficiency: float


class CadenceOptimizer:
    """
    Derives an optimal cadence band from efficiency-ranked samples.

    Algorithm:
    1. Keep samples where pace, cadence and heart rate are all present.
    2. Rank them by efficiency and keep the top quartile.
    3. The optimal band is the interquartile range of those cadences,
       widened around its midpoint to a minimum width.

    With too few complete samples the default 170-180 spm band is used.
    """

    def __init__(
        self,
        settings: Optional[AnalysisSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._logger = logger or logging.getLogger(__name__)

    def optimize(self, workouts: Iterable[Workout]) -> CadenceResult:
        """Optimize cadence over every sample of the given workouts."""
        samples = [s for workout in workouts for s in workout.data_points]
        return self.optimize_samples(samples)

    def optimize_samples(self, samples: Iterable[Sample]) -> CadenceResult:
        """Optimize cadence from samples, keeping each sample's readings together."""
        readings: List[CadenceReading] = []
        cadences: List[float] = []

        for sample in samples:
            if sample.cadence <= 0:
                continue
            cadences.append(sample.cadence)
            efficiency = efficiency_index(sample.pace, sample.heart_rate)
            if efficiency is not None:
                readings.append(CadenceReading(sample.cadence, efficiency))

        return self._optimize(readings, cadences)

    def optimize_series(
        self,
        paces: Sequence[float],
        cadences: Sequence[float],
        heart_rates: Sequence[float],
    ) -> CadenceResult:
        """
        Optimize cadence from index-aligned readings of a single workout.

        Triples are formed position by position up to the shortest sequence.
        The current average still uses every valid cadence reading.
        """
        readings: List[CadenceReading] = []
        for pace, cadence, hr in zip(paces, cadences, heart_rates):
            if cadence <= 0:
                continue
            efficiency = efficiency_index(pace, hr)
            if efficiency is not None:
                readings.append(CadenceReading(cadence, efficiency))

        valid_cadences = [c for c in cadences if c > 0]
        return self._optimize(readings, valid_cadences)

    def optimal_band(self, readings: Sequence[CadenceReading]) -> Optional[Tuple[float, float]]:
        """
        Cadence band of the most efficient readings.

        Returns:
            (low, high) in spm, or None if there are too few readings
        """
        if not readings or len(readings) < self._settings.min_cadence_samples:
            return None

        threshold = percentile(
            [r.efficiency for r in readings],
            self._settings.cadence_efficiency_percentile,
        )
        top_cadences = [r.cadence for r in readings if r.efficiency >= threshold]

        low = percentile(top_cadences, 25.0)
        high = percentile(top_cadences, 75.0)

        min_width = self._settings.cadence_min_band_width
        if high - low < min_width:
            midpoint = (low + high) / 2
            low = midpoint - min_width / 2
            high = midpoint + min_width / 2

        return (low, high)

    def _optimize(
        self,
        readings: Sequence[CadenceReading],
        cadences: Sequence[float],
    ) -> CadenceResult:
        default_band = tuple(self._settings.default_cadence_band)

        if not cadences:
            self._logger.debug("Cadence: no valid cadence readings")
            return CadenceResult(
                current_average=0.0,
                optimal_range=default_band,
                recommendation=(
                    f"No cadence data recorded. Aim for "
                    f"{default_band[0]:.0f}-{default_band[1]:.0f} spm."
                ),
                in_range_percentage=0.0,
                used_default_band=True,
            )

        current_average = mean(cadences) or 0.0
        band = self.optimal_band(readings)
        used_default = band is None
        low, high = default_band if band is None else band

        in_range = sum(1 for c in cadences if low <= c <= high)
        in_range_percentage = in_range / len(cadences) * 100

        if used_default:
            self._logger.debug(
                f"Cadence: {len(readings)} complete readings, "
                f"need {self._settings.min_cadence_samples}; using default band"
            )
            recommendation = (
                f"More data is needed to personalise your cadence. Aim for "
                f"{low:.0f}-{high:.0f} spm; current average is {current_average:.0f} spm."
            )
        else:
            recommendation = (
                f"Optimal cadence is {low:.0f}-{high:.0f} spm. "
                f"Current average is {current_average:.0f} spm."
            )

        return CadenceResult(
            current_average=current_average,
            optimal_range=(low, high),
            recommendation=recommendation,
            in_range_percentage=in_range_percentage,
            used_default_band=used_default,
        )
