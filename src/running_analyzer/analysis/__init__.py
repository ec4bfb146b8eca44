"""
Analyzers for running data.

Provides pace stability, efficiency, cadence optimization, overtraining
risk, long-term trend and weekly summaries.
"""

from .pace_stability import PaceStabilityAnalyzer
from .efficiency import EfficiencyAnalyzer
from .cadence import CadenceOptimizer, CadenceReading
from .overtraining import (
    RECOMMENDED_REST_DAYS,
    OvertrainingRiskAssessor,
    recommended_rest_days,
)
from .long_term import (
    LongTermTrendAnalyzer,
    average_distance,
    average_efficiency,
)
from .weekly import WeeklySummaryAnalyzer

__all__ = [
    # Single workout
    "PaceStabilityAnalyzer",
    "EfficiencyAnalyzer",
    "CadenceOptimizer",
    "CadenceReading",
    # History
    "OvertrainingRiskAssessor",
    "RECOMMENDED_REST_DAYS",
    "recommended_rest_days",
    "LongTermTrendAnalyzer",
    "average_distance",
    "average_efficiency",
    "WeeklySummaryAnalyzer",
]
