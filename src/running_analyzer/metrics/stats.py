"""Numeric primitives shared by the analyzers.

Pure math with no running-specific knowledge. Degenerate inputs return a
defined value (``None`` or 0) instead of raising.
"""

import math
import statistics
from typing import Optional, Sequence

from ..models.results import TrendDirection


def mean(values: Sequence[float]) -> Optional[float]:
    """
    Arithmetic mean.

    Args:
        values: Numeric values

    Returns:
        Mean, or None if there are no values
    """
    if not values:
        return None
    return statistics.fmean(values)


def variance(values: Sequence[float]) -> float:
    """Population variance; 0 for fewer than 2 values."""
    if len(values) < 2:
        return 0.0
    return statistics.pvariance(values)


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation; 0 for fewer than 2 values."""
    if len(values) < 2:
        return 0.0
    return statistics.pstdev(values)


def coefficient_of_variation(values: Sequence[float]) -> float:
    """
    Coefficient of variation as a percentage: (stddev / mean) * 100.

    A single value has no spread to report, so fewer than 2 values gives 0.
    A zero mean also gives 0.

    Args:
        values: Numeric values

    Returns:
        CV in percent
    """
    if len(values) < 2:
        return 0.0
    avg = statistics.fmean(values)
    if avg == 0:
        return 0.0
    return (statistics.pstdev(values) / avg) * 100


def linear_trend_slope(values: Sequence[float]) -> float:
    """
    Ordinary least squares slope of value against index position.

    Positive means the series rises with index, negative means it falls.

    Args:
        values: Ordered values

    Returns:
        Slope per index step, 0 for fewer than 2 values
    """
    n = len(values)
    if n < 2:
        return 0.0

    x_mean = (n - 1) / 2
    y_mean = statistics.fmean(values)

    numerator = sum((i - x_mean) * (v - y_mean) for i, v in enumerate(values))
    denominator = sum((i - x_mean) ** 2 for i in range(n))

    if denominator == 0:
        return 0.0
    return numerator / denominator


def percentile(values: Sequence[float], pct: float) -> Optional[float]:
    """
    Percentile with linear interpolation between closest ranks.

    Args:
        values: Numeric values (any order)
        pct: Percentile in [0, 100]

    Returns:
        Interpolated percentile, or None if there are no values
    """
    if not values:
        return None

    ordered = sorted(values)
    pct = max(0.0, min(100.0, pct))
    rank = (pct / 100) * (len(ordered) - 1)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    if lower == upper:
        return ordered[lower]
    weight = rank - lower
    return ordered[lower] + (ordered[upper] - ordered[lower]) * weight


def classify_trend(slope: float, epsilon: float) -> TrendDirection:
    """Map a slope to a direction; |slope| <= epsilon is stable."""
    if slope > epsilon:
        return TrendDirection.IMPROVING
    elif slope < -epsilon:
        return TrendDirection.DECLINING
    else:
        return TrendDirection.STABLE
