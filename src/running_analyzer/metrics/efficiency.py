"""Efficiency index calculations (speed produced per heartbeat)."""

from typing import Iterable, List, Optional, Sequence

from ..models.workout import Sample, Workout
from .stats import mean

SECONDS_PER_HOUR = 3600.0


def efficiency_index(pace_sec_per_km: float, heart_rate: float) -> Optional[float]:
    """
    Efficiency index = speed (km/h) / heart rate (bpm).

    Higher values mean more speed for each heartbeat. A pace of 300 s/km
    (12 km/h) at 150 bpm gives 0.08.

    Args:
        pace_sec_per_km: Pace in seconds per km (0 = absent)
        heart_rate: Heart rate in bpm (0 = absent)

    Returns:
        Efficiency index, or None if either reading is absent
    """
    if pace_sec_per_km <= 0 or heart_rate <= 0:
        return None
    speed_kmh = SECONDS_PER_HOUR / pace_sec_per_km
    return speed_kmh / heart_rate


def paired_efficiencies(
    paces: Sequence[float],
    heart_rates: Sequence[float],
) -> List[float]:
    """Efficiency per index-aligned (pace, heart rate) pair, skipping absent readings."""
    efficiencies = []
    for pace, hr in zip(paces, heart_rates):
        value = efficiency_index(pace, hr)
        if value is not None:
            efficiencies.append(value)
    return efficiencies


def sample_efficiencies(samples: Iterable[Sample]) -> List[float]:
    """Efficiency for each sample that has both pace and heart rate."""
    efficiencies = []
    for sample in samples:
        value = efficiency_index(sample.pace, sample.heart_rate)
        if value is not None:
            efficiencies.append(value)
    return efficiencies


def workout_efficiency(workout: Workout) -> Optional[float]:
    """
    Workout-level efficiency.

    Uses the workout's average pace and heart rate when both are recorded,
    otherwise the mean of its per-sample efficiencies.

    Returns:
        Efficiency index, or None if the workout has no usable readings
    """
    value = efficiency_index(workout.average_pace, workout.average_heart_rate)
    if value is not None:
        return value
    return mean(sample_efficiencies(workout.data_points))
