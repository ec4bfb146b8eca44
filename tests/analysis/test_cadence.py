"""Tests for cadence optimization."""

import pytest

from running_analyzer.analysis.cadence import CadenceOptimizer, CadenceReading


def _two_cadence_samples(make_samples, slow_count=9, fast_count=3):
    """Slow, less efficient steps at 165 spm and fast, efficient steps at 180 spm."""
    paces = [360.0] * slow_count + [240.0] * fast_count
    heart_rates = [150.0] * (slow_count + fast_count)
    cadences = [165.0] * slow_count + [180.0] * fast_count
    return make_samples(paces, heart_rates, cadences)


class TestCadenceOptimizer:
    """Tests for CadenceOptimizer."""

    @pytest.fixture
    def optimizer(self, settings):
        """Optimizer with default settings."""
        return CadenceOptimizer(settings)

    def test_cadence_only_uses_default_band(self, optimizer, make_samples):
        """Test cadence without pace or heart rate."""
        samples = make_samples([0.0] * 12, [0.0] * 12, [175.0] * 12)
        result = optimizer.optimize_samples(samples)

        assert result.current_average == 175.0
        assert result.optimal_range == (170.0, 180.0)
        assert result.in_range_percentage == 100.0
        assert result.used_default_band is True

    def test_no_cadence_readings(self, optimizer, make_samples):
        """Test a run without any cadence data."""
        result = optimizer.optimize_samples(make_samples([300.0] * 5, [150.0] * 5))

        assert result.current_average == 0.0
        assert result.optimal_range == (170.0, 180.0)
        assert result.in_range_percentage == 0.0
        assert "no cadence" in result.recommendation.lower()

    def test_personalised_band(self, optimizer, make_samples):
        """Test that the band follows the most efficient samples."""
        result = optimizer.optimize_samples(_two_cadence_samples(make_samples))

        # Top quartile is the three 180 spm samples; band widened to 10 spm
        assert result.used_default_band is False
        assert result.optimal_range == pytest.approx((175.0, 185.0))
        assert result.current_average == pytest.approx(168.75)
        assert result.in_range_percentage == pytest.approx(25.0)

    def test_too_few_complete_samples(self, optimizer, make_samples):
        """Test the default band below the minimum number of triples."""
        result = optimizer.optimize_samples(_two_cadence_samples(make_samples, 6, 3))

        assert result.used_default_band is True
        assert result.optimal_range == (170.0, 180.0)

    def test_range_bounds_are_ordered(self, optimizer, make_samples):
        """Test low <= high for the personalised band."""
        low, high = optimizer.optimize_samples(_two_cadence_samples(make_samples)).optimal_range
        assert low <= high

    def test_optimize_across_workouts(self, optimizer, make_samples, make_workout):
        """Test pooling samples from several workouts."""
        first = make_workout(data_points=_two_cadence_samples(make_samples, 5, 0))
        second = make_workout(days_ago=2, data_points=_two_cadence_samples(make_samples, 4, 3))
        result = optimizer.optimize([first, second])

        assert result.used_default_band is False
        assert result.optimal_range == pytest.approx((175.0, 185.0))

    def test_series_pairs_by_position(self, optimizer):
        """Test the index-aligned entry point with uneven lengths."""
        paces = [360.0] * 9 + [240.0] * 3
        cadences = [165.0] * 9 + [180.0] * 3 + [180.0]
        heart_rates = [150.0] * 12
        result = optimizer.optimize_series(paces, cadences, heart_rates)

        assert result.used_default_band is False
        # The unmatched trailing cadence still counts toward the average
        assert result.current_average == pytest.approx((165.0 * 9 + 180.0 * 4) / 13)

    def test_optimal_band_none_when_sparse(self, optimizer):
        """Test optimal_band below the minimum reading count."""
        readings = [CadenceReading(cadence=175.0, efficiency=0.08)] * 5
        assert optimizer.optimal_band(readings) is None

    def test_wide_band_is_not_narrowed(self, optimizer):
        """Test that an already wide band is kept as is."""
        readings = [CadenceReading(cadence=160.0 + 2 * i, efficiency=0.1) for i in range(12)]
        low, high = optimizer.optimal_band(readings)

        # All readings tie at the threshold, IQR of 160..182 is 165.5..176.5
        assert low == pytest.approx(165.5)
        assert high == pytest.approx(176.5)

    def test_to_dict(self, optimizer, make_samples):
        """Test serialization of the range as a list."""
        data = optimizer.optimize_samples(make_samples([0.0], [0.0], [172.0])).to_dict()
        assert data["optimal_range"] == [170.0, 180.0]
        assert data["used_default_band"] is True

    def test_no_complete_readings_with_zero_minimum(self, settings, make_samples):
        """Test cadence-only samples when the minimum is bypassed."""
        optimizer = CadenceOptimizer(settings.model_copy(update={"min_cadence_samples": 0}))
        result = optimizer.optimize_samples(make_samples([0.0], [0.0], [175.0]))

        assert optimizer.optimal_band([]) is None
        assert result.used_default_band is True
        assert result.optimal_range == (170.0, 180.0)
