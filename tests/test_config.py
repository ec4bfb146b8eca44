"""Tests for analysis settings."""

import pytest

from running_analyzer.config import AnalysisSettings, get_settings, load_settings
from running_analyzer.exceptions import ConfigurationError, ErrorCode


class TestAnalysisSettings:
    """Tests for AnalysisSettings."""

    def test_defaults(self, settings):
        """Test the default thresholds."""
        assert settings.stability_stable_cv == 5.0
        assert settings.stability_unstable_cv == 15.0
        assert settings.default_cadence_band == (170.0, 180.0)
        assert settings.min_cadence_samples == 10
        assert settings.min_trend_workouts == 3
        assert settings.min_overtraining_workouts == 2
        assert settings.recovery_bucket_edges == (1.0, 2.0, 3.0, 5.0)
        assert settings.heart_rate_zone_boundaries == (0.5, 0.6, 0.7, 0.8, 0.9)

    def test_keyword_override(self):
        """Test overriding a threshold directly."""
        settings = AnalysisSettings(_env_file=None, volume_spike_ratio=1.5)
        assert settings.volume_spike_ratio == 1.5

    def test_environment_override(self, monkeypatch):
        """Test overriding a threshold from the environment."""
        monkeypatch.setenv("RUNNING_ANALYZER_STABILITY_UNSTABLE_CV", "12")
        settings = AnalysisSettings(_env_file=None)
        assert settings.stability_unstable_cv == 12.0

    def test_settings_config(self):
        """Test the environment prefix and env file settings."""
        config = AnalysisSettings.model_config

        assert config["env_prefix"] == "RUNNING_ANALYZER_"
        assert config["env_file"] == ".env"
        assert config["extra"] == "ignore"

    def test_get_settings_is_cached(self):
        """Test that the default instance is shared."""
        assert get_settings() is get_settings()


class TestLoadSettings:
    """Tests for load_settings."""

    def test_valid_overrides(self):
        """Test building settings through the loader."""
        settings = load_settings(min_cadence_samples=20)
        assert settings.min_cadence_samples == 20

    @pytest.mark.parametrize(
        "overrides",
        [
            {"stability_stable_cv": 20.0, "stability_unstable_cv": 10.0},
            {"efficiency_low_threshold": 0.1, "efficiency_high_threshold": 0.05},
            {"default_cadence_band": (185.0, 170.0)},
            {"recovery_bucket_edges": (1.0, 1.0, 3.0, 5.0)},
            {"trend_recent_window": 0},
            {"high_risk_score": 0.5},
            {"cadence_efficiency_percentile": 120.0},
            {"min_cadence_samples": 0},
            {"min_pace_samples": 1},
            {"min_recovery_workouts": 1},
            {"min_trend_workouts": 0},
            {"min_overtraining_workouts": 0},
            {"heart_rate_zone_boundaries": (0.5, 0.7, 0.6, 0.8, 0.9)},
            {"heart_rate_zone_boundaries": (0.0, 0.6, 0.7, 0.8, 0.9)},
            {"heart_rate_zone_boundaries": (0.5, 0.6, 0.7, 0.8, 1.0)},
        ],
    )
    def test_inconsistent_settings(self, overrides):
        """Test that inconsistent values raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(**overrides)

        assert exc_info.value.code == ErrorCode.CONFIGURATION_ERROR
        assert exc_info.value.details["errors"]

    def test_wrong_type(self):
        """Test a value that cannot be parsed."""
        with pytest.raises(ConfigurationError):
            load_settings(min_pace_samples="many")
