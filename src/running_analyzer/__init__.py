"""Local analysis engine for personal running data."""

from running_analyzer.config import AnalysisSettings, get_settings, load_settings
from running_analyzer.exceptions import (
    AnalysisError,
    ConfigurationError,
    ErrorCode,
    InvalidWorkoutDataError,
)
from running_analyzer.models import (
    CadenceResult,
    EfficiencyResult,
    HistoryAnalysisResult,
    LongTermTrendResult,
    OvertrainingResult,
    PaceStabilityResult,
    RecoveryPattern,
    RiskLevel,
    RiskSignal,
    Sample,
    StabilityLevel,
    TrendDirection,
    WeeklyStats,
    Workout,
    WorkoutAnalysisResult,
)
from running_analyzer.services import AnalysisService

__version__ = "0.1.0"

__all__ = [
    "AnalysisService",
    "AnalysisSettings",
    "get_settings",
    "load_settings",
    "AnalysisError",
    "ConfigurationError",
    "ErrorCode",
    "InvalidWorkoutDataError",
    "Sample",
    "Workout",
    "StabilityLevel",
    "RiskLevel",
    "RiskSignal",
    "TrendDirection",
    "RecoveryPattern",
    "PaceStabilityResult",
    "EfficiencyResult",
    "CadenceResult",
    "OvertrainingResult",
    "LongTermTrendResult",
    "WeeklyStats",
    "WorkoutAnalysisResult",
    "HistoryAnalysisResult",
]
