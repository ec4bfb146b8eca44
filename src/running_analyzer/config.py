"""Configuration settings for the running analysis engine."""

from functools import lru_cache
from typing import Any, Tuple

from pydantic import ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class AnalysisSettings(BaseSettings):
    """Analysis thresholds, loaded from keyword arguments or environment variables.

    Every threshold the analyzers use lives here so it can be tuned without
    code changes, e.g. ``RUNNING_ANALYZER_STABILITY_UNSTABLE_CV=12``.
    """

    # Pace stability (coefficient of variation, %)
    stability_stable_cv: float = 5.0  # cv below this is stable
    stability_unstable_cv: float = 15.0  # cv above this is unstable
    min_pace_samples: int = 2

    # Efficiency (km/h per bpm)
    efficiency_trend_epsilon: float = 0.001
    efficiency_low_threshold: float = 0.05
    efficiency_high_threshold: float = 0.08

    # Cadence (steps per minute)
    default_cadence_band: Tuple[float, float] = (170.0, 180.0)
    min_cadence_samples: int = 10
    cadence_efficiency_percentile: float = 75.0  # top quartile
    cadence_min_band_width: float = 10.0

    # Long-term trend
    trend_recent_window: int = 5
    trend_previous_window: int = 5
    min_trend_workouts: int = 3
    min_recovery_workouts: int = 5
    recovery_bucket_edges: Tuple[float, float, float, float] = (1.0, 2.0, 3.0, 5.0)

    # Overtraining risk
    min_overtraining_workouts: int = 2
    overtraining_window: int = 5
    overtraining_baseline_window: int = 10
    frequency_interval_threshold_days: float = 1.0
    volume_spike_ratio: float = 1.3
    frequency_weight: float = 1.0
    volume_weight: float = 1.0
    efficiency_weight: float = 1.0
    medium_risk_score: float = 1.0
    high_risk_score: float = 2.0

    # Heart-rate zones (fraction of heart-rate reserve, Karvonen)
    heart_rate_zone_boundaries: Tuple[float, float, float, float, float] = (
        0.5, 0.6, 0.7, 0.8, 0.9,
    )  # lower bound of zones 1-5

    # Weekly summary
    weekly_window_days: int = 7

    @model_validator(mode="after")
    def _check_consistency(self) -> "AnalysisSettings":
        if self.stability_stable_cv > self.stability_unstable_cv:
            raise ValueError("stability_stable_cv must not exceed stability_unstable_cv")
        if self.efficiency_low_threshold > self.efficiency_high_threshold:
            raise ValueError("efficiency_low_threshold must not exceed efficiency_high_threshold")
        if self.efficiency_trend_epsilon < 0:
            raise ValueError("efficiency_trend_epsilon must be non-negative")

        low, high = self.default_cadence_band
        if low > high:
            raise ValueError("default_cadence_band must be (low, high)")
        if not 0.0 <= self.cadence_efficiency_percentile <= 100.0:
            raise ValueError("cadence_efficiency_percentile must be within 0-100")

        zones = self.heart_rate_zone_boundaries
        if any(later <= earlier for earlier, later in zip(zones, zones[1:])):
            raise ValueError("heart_rate_zone_boundaries must be strictly ascending")
        if not (0.0 < zones[0] and zones[-1] < 1.0):
            raise ValueError("heart_rate_zone_boundaries must lie strictly between 0 and 1")

        edges = self.recovery_bucket_edges
        if any(later <= earlier for earlier, later in zip(edges, edges[1:])):
            raise ValueError("recovery_bucket_edges must be strictly ascending")

        windows = {
            "trend_recent_window": self.trend_recent_window,
            "trend_previous_window": self.trend_previous_window,
            "overtraining_window": self.overtraining_window,
            "overtraining_baseline_window": self.overtraining_baseline_window,
            "weekly_window_days": self.weekly_window_days,
        }
        for name, value in windows.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive")

        minimums = {
            "min_pace_samples": (self.min_pace_samples, 2),
            "min_cadence_samples": (self.min_cadence_samples, 1),
            "min_trend_workouts": (self.min_trend_workouts, 1),
            "min_recovery_workouts": (self.min_recovery_workouts, 2),
            "min_overtraining_workouts": (self.min_overtraining_workouts, 1),
        }
        for name, (value, floor) in minimums.items():
            if value < floor:
                raise ValueError(f"{name} must be at least {floor}")

        if self.high_risk_score < self.medium_risk_score:
            raise ValueError("high_risk_score must not be below medium_risk_score")
        return self

    model_config = SettingsConfigDict(
        env_prefix="RUNNING_ANALYZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def load_settings(**overrides: Any) -> AnalysisSettings:
    """Build settings with explicit overrides.

    Raises:
        ConfigurationError: If the resulting configuration is inconsistent.
    """
    try:
        return AnalysisSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid analysis settings",
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e


@lru_cache
def get_settings() -> AnalysisSettings:
    """Get cached default settings instance."""
    return AnalysisSettings()
