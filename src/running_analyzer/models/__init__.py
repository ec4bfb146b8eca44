"""Workout input models and analysis result records."""

from .workout import Sample, Workout, to_camel, to_utc
from .results import (
    CadenceResult,
    EfficiencyResult,
    HistoryAnalysisResult,
    LongTermTrendResult,
    OvertrainingResult,
    PaceStabilityResult,
    RecoveryPattern,
    RiskLevel,
    RiskSignal,
    StabilityLevel,
    TrendDirection,
    WeeklyStats,
    WorkoutAnalysisResult,
)

__all__ = [
    # Inputs
    "Sample",
    "Workout",
    "to_camel",
    "to_utc",
    # Enums
    "StabilityLevel",
    "RiskLevel",
    "RiskSignal",
    "TrendDirection",
    "RecoveryPattern",
    # Results
    "PaceStabilityResult",
    "EfficiencyResult",
    "CadenceResult",
    "OvertrainingResult",
    "LongTermTrendResult",
    "WeeklyStats",
    "WorkoutAnalysisResult",
    "HistoryAnalysisResult",
]
