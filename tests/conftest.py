"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta

import pytest

from running_analyzer.config import AnalysisSettings
from running_analyzer.models.workout import Sample, Workout


BASE_DATE = datetime(2025, 6, 1, 7, 0, 0)


def make_samples(paces, heart_rates=None, cadences=None, start=BASE_DATE):
    """Build time-ascending samples, one per second; missing readings are 0."""
    heart_rates = heart_rates or [0.0] * len(paces)
    cadences = cadences or [0.0] * len(paces)
    return tuple(
        Sample(
            timestamp=start + timedelta(seconds=i),
            pace=pace,
            heart_rate=hr,
            cadence=cadence,
        )
        for i, (pace, hr, cadence) in enumerate(zip(paces, heart_rates, cadences))
    )


def make_workout(
    days_ago=0.0,
    distance=5.0,
    average_pace=330.0,
    average_heart_rate=150.0,
    data_points=(),
    reference=BASE_DATE,
    workout_id=None,
):
    """Build a workout dated ``days_ago`` days before ``reference``."""
    return Workout(
        id=workout_id,
        date=reference - timedelta(days=days_ago),
        duration=distance * average_pace,
        distance=distance,
        average_heart_rate=average_heart_rate,
        average_pace=average_pace,
        average_cadence=172.0,
        data_points=data_points,
    )


def make_history(count, gap_days=2.0, **kwargs):
    """Newest-first history of ``count`` identical workouts spaced ``gap_days`` apart."""
    return [make_workout(days_ago=i * gap_days, **kwargs) for i in range(count)]


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return AnalysisSettings(_env_file=None)


@pytest.fixture
def steady_workout():
    """A 20-sample run at even pace with cadence and heart rate."""
    paces = [300.0] * 20
    heart_rates = [150.0] * 20
    cadences = [176.0] * 20
    return Workout(
        id="steady-1",
        date=BASE_DATE,
        duration=1200.0,
        distance=4.0,
        average_heart_rate=150.0,
        average_pace=300.0,
        average_cadence=176.0,
        data_points=make_samples(paces, heart_rates, cadences),
    )


@pytest.fixture(name="make_samples")
def make_samples_fixture():
    """Factory for time-ascending samples."""
    return make_samples


@pytest.fixture(name="make_workout")
def make_workout_fixture():
    """Factory for a single workout."""
    return make_workout


@pytest.fixture(name="make_history")
def make_history_fixture():
    """Factory for a newest-first workout history."""
    return make_history
