"""Tests for pace stability analysis."""

import pytest

from running_analyzer.analysis.pace_stability import PaceStabilityAnalyzer
from running_analyzer.config import AnalysisSettings
from running_analyzer.models.results import StabilityLevel


class TestPaceStabilityAnalyzer:
    """Tests for PaceStabilityAnalyzer."""

    @pytest.fixture
    def analyzer(self, settings):
        """Analyzer with default thresholds."""
        return PaceStabilityAnalyzer(settings)

    def test_even_pace_is_stable(self, analyzer):
        """Test a perfectly even run."""
        result = analyzer.analyze([300.0, 300.0, 300.0, 300.0])

        assert result.cv == 0.0
        assert result.level == StabilityLevel.STABLE
        assert result.sample_count == 4
        assert result.warning

    def test_moderate_variation(self, analyzer):
        """Test CV between 5% and 15%."""
        # mean 300, pstdev 30 -> 10%
        result = analyzer.analyze([270.0, 330.0, 270.0, 330.0])

        assert result.cv == pytest.approx(10.0)
        assert result.level == StabilityLevel.MODERATE

    def test_unstable_variation(self, analyzer):
        """Test CV above 15%."""
        # mean 300, pstdev 100 -> 33%
        result = analyzer.analyze([200.0, 400.0, 200.0, 400.0])

        assert result.level == StabilityLevel.UNSTABLE
        assert "even pacing" in result.warning.lower()

    def test_filters_absent_paces(self, analyzer):
        """Test that zero readings do not count as paces."""
        result = analyzer.analyze([300.0, 0.0, 300.0, 0.0, 300.0])

        assert result.cv == 0.0
        assert result.level == StabilityLevel.STABLE
        assert result.sample_count == 3

    def test_insufficient_data(self, analyzer):
        """Test fewer than two valid paces."""
        for paces in ([], [300.0], [0.0, 0.0, 310.0]):
            result = analyzer.analyze(paces)
            assert result.level == StabilityLevel.INSUFFICIENT_DATA
            assert result.cv == 0.0
            assert "not enough" in result.warning.lower()

    def test_classify_boundaries(self, analyzer):
        """Test the inclusive moderate band."""
        assert analyzer.classify(4.99) == StabilityLevel.STABLE
        assert analyzer.classify(5.0) == StabilityLevel.MODERATE
        assert analyzer.classify(15.0) == StabilityLevel.MODERATE
        assert analyzer.classify(15.01) == StabilityLevel.UNSTABLE

    def test_custom_thresholds(self):
        """Test that thresholds come from settings."""
        analyzer = PaceStabilityAnalyzer(
            AnalysisSettings(_env_file=None, stability_stable_cv=12.0, stability_unstable_cv=20.0)
        )
        result = analyzer.analyze([270.0, 330.0, 270.0, 330.0])

        assert result.level == StabilityLevel.STABLE

    def test_to_dict(self, analyzer):
        """Test serialization."""
        data = analyzer.analyze([300.0, 310.0]).to_dict()

        assert data["level"] == "stable"
        assert set(data) == {"cv", "level", "warning", "sample_count"}
