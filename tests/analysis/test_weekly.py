"""Tests for the trailing-week summary."""

from datetime import timedelta

import pytest

from running_analyzer.analysis.weekly import WeeklySummaryAnalyzer


class TestWeeklySummaryAnalyzer:
    """Tests for WeeklySummaryAnalyzer."""

    @pytest.fixture
    def analyzer(self, settings):
        """Analyzer with a seven-day window."""
        return WeeklySummaryAnalyzer(settings)

    def test_empty_history(self, analyzer):
        """Test that no workouts gives zeros."""
        result = analyzer.summarize([])

        assert result.total_distance == 0.0
        assert result.workout_count == 0
        assert result.average_efficiency == 0.0

    def test_window_ends_at_latest_workout(self, analyzer, make_history):
        """Test the default reference."""
        # days_ago 0, 2, 4, 6 fall inside the week; 8 and 10 do not
        result = analyzer.summarize(make_history(6, gap_days=2.0, distance=5.0))

        assert result.workout_count == 4
        assert result.total_distance == pytest.approx(20.0)
        assert result.average_efficiency == pytest.approx(3600 / 330 / 150)

    def test_window_start_is_inclusive(self, analyzer, make_workout):
        """Test a workout exactly seven days before the reference."""
        history = [make_workout(days_ago=0), make_workout(days_ago=7), make_workout(days_ago=7.01)]
        assert analyzer.summarize(history).workout_count == 2

    def test_explicit_reference(self, analyzer, make_history):
        """Test a window ending in the past."""
        history = make_history(6, gap_days=2.0)
        reference = history[0].date - timedelta(days=3)
        result = analyzer.summarize(history, reference=reference)

        # days_ago 4, 6, 8 and 10 fall in [10, 3] days ago
        assert result.workout_count == 4

    def test_order_does_not_matter(self, analyzer, make_history):
        """Test that history order is irrelevant."""
        history = make_history(6, gap_days=1.0)
        assert analyzer.summarize(history) == analyzer.summarize(list(reversed(history)))

    def test_to_dict(self, analyzer, make_history):
        """Test serialization."""
        data = analyzer.summarize(make_history(2, distance=4.25)).to_dict()

        assert data["total_distance"] == 8.5
        assert data["workout_count"] == 2
