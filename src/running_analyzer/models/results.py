"""Result records returned by the analyzers.

All results are frozen value objects. Presentation (colors, icons, layout)
is left to the caller, which switches on the closed enums below.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class StabilityLevel(str, Enum):
    """Pace consistency classification."""
    STABLE = "stable"
    MODERATE = "moderate"
    UNSTABLE = "unstable"
    INSUFFICIENT_DATA = "insufficient_data"


class RiskLevel(str, Enum):
    """Overtraining risk level."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TrendDirection(str, Enum):
    """Direction of a fitted trend."""
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class RecoveryPattern(str, Enum):
    """Typical gap between consecutive workouts."""
    DAILY = "daily"                                # < 1 day
    EVERY_OTHER_DAY = "every_other_day"            # 1-2 days
    TWO_DAY_GAP = "two_day_gap"                    # 2-3 days
    THREE_TO_FOUR_DAY_GAP = "three_to_four_day_gap"  # 3-5 days
    IRREGULAR = "irregular"                        # 5+ days
    INSUFFICIENT_DATA = "insufficient_data"


class RiskSignal(str, Enum):
    """Signals that feed the overtraining score."""
    FREQUENCY = "frequency"
    VOLUME = "volume"
    EFFICIENCY_DECLINE = "efficiency_decline"


@dataclass(frozen=True)
class PaceStabilityResult:
    """How consistent the pace was across a run."""

    cv: float                   # Coefficient of variation, %
    level: StabilityLevel
    warning: str
    sample_count: int = 0       # Valid paces used

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "cv": round(self.cv, 2),
            "level": self.level.value,
            "warning": self.warning,
            "sample_count": self.sample_count,
        }


@dataclass(frozen=True)
class EfficiencyResult:
    """Speed-per-heartbeat efficiency and its trend."""

    average_efficiency: float   # km/h per bpm
    trend: float                # OLS slope per sample
    recommendation: str         # Trend-based advice
    trend_direction: TrendDirection = TrendDirection.STABLE
    level_recommendation: str = ""  # Absolute-level advice
    sample_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "average_efficiency": round(self.average_efficiency, 4),
            "trend": round(self.trend, 6),
            "recommendation": self.recommendation,
            "trend_direction": self.trend_direction.value,
            "level_recommendation": self.level_recommendation,
            "sample_count": self.sample_count,
        }


@dataclass(frozen=True)
class CadenceResult:
    """Cadence band associated with the best observed efficiency."""

    current_average: float
    optimal_range: Tuple[float, float]
    recommendation: str
    in_range_percentage: float = 0.0
    used_default_band: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "current_average": round(self.current_average, 1),
            "optimal_range": [round(self.optimal_range[0], 1), round(self.optimal_range[1], 1)],
            "recommendation": self.recommendation,
            "in_range_percentage": round(self.in_range_percentage, 1),
            "used_default_band": self.used_default_band,
        }


@dataclass(frozen=True)
class OvertrainingResult:
    """Overtraining risk from frequency, volume and efficiency signals."""

    level: RiskLevel
    recommendations: List[str]
    risk_score: float = 0.0
    recommended_rest_days: int = 1
    triggered_signals: List[RiskSignal] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "level": self.level.value,
            "recommendations": list(self.recommendations),
            "risk_score": round(self.risk_score, 2),
            "recommended_rest_days": self.recommended_rest_days,
            "triggered_signals": [s.value for s in self.triggered_signals],
        }


@dataclass(frozen=True)
class LongTermTrendResult:
    """Recent block of workouts compared with the one before it."""

    efficiency_improvement: float   # %
    distance_improvement: float     # km
    recovery_pattern: RecoveryPattern

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "efficiency_improvement": round(self.efficiency_improvement, 1),
            "distance_improvement": round(self.distance_improvement, 2),
            "recovery_pattern": self.recovery_pattern.value,
        }


@dataclass(frozen=True)
class WeeklyStats:
    """Totals for the trailing week."""

    total_distance: float
    workout_count: int
    average_efficiency: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "total_distance": round(self.total_distance, 2),
            "workout_count": self.workout_count,
            "average_efficiency": round(self.average_efficiency, 4),
        }


@dataclass(frozen=True)
class WorkoutAnalysisResult:
    """Per-workout analysis bundle."""

    pace_stability: PaceStabilityResult
    efficiency: EfficiencyResult
    cadence: CadenceResult
    recommendations: List[str] = field(default_factory=list)
    workout_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "workout_id": self.workout_id,
            "pace_stability": self.pace_stability.to_dict(),
            "efficiency": self.efficiency.to_dict(),
            "cadence": self.cadence.to_dict(),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class HistoryAnalysisResult:
    """History-wide analysis bundle."""

    overtraining: OvertrainingResult
    long_term_trend: LongTermTrendResult
    cadence: CadenceResult
    weekly: WeeklyStats

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "overtraining": self.overtraining.to_dict(),
            "long_term_trend": self.long_term_trend.to_dict(),
            "cadence": self.cadence.to_dict(),
            "weekly": self.weekly.to_dict(),
        }
