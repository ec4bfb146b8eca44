"""Numeric primitives, efficiency and heart rate zone calculations."""

from .stats import (
    classify_trend,
    coefficient_of_variation,
    linear_trend_slope,
    mean,
    percentile,
    standard_deviation,
    variance,
)
from .efficiency import (
    efficiency_index,
    paired_efficiencies,
    sample_efficiencies,
    workout_efficiency,
)
from .schedule import gaps_in_days, mean_gap_days
from .zones import (
    HeartRateZones,
    estimate_max_hr_from_age,
    heart_rate_zone,
    karvonen_zones,
)

__all__ = [
    # Statistics
    "mean",
    "variance",
    "standard_deviation",
    "coefficient_of_variation",
    "linear_trend_slope",
    "percentile",
    "classify_trend",
    # Efficiency
    "efficiency_index",
    "paired_efficiencies",
    "sample_efficiencies",
    "workout_efficiency",
    # Schedule
    "gaps_in_days",
    "mean_gap_days",
    # Heart rate zones
    "HeartRateZones",
    "estimate_max_hr_from_age",
    "heart_rate_zone",
    "karvonen_zones",
]
