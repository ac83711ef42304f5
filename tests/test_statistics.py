import math
import random
from datetime import datetime, timedelta

import pytest

from runit.domain import Exercise, Statistics
from runit.domain.statistics import EPOCH


def test_empty_statistics_are_zero():
    stats = Statistics([])
    assert stats.total_exercises == 0
    assert stats.total_distance == 0
    assert stats.total_duration == 0
    assert stats.avg_speed == 0.0

    avg = stats.avg_exercise
    assert avg.duration == 0
    assert avg.distance == 0.0
    assert avg.avg_speed() == 0.0
    assert avg.timestamp == EPOCH


def test_totals_and_averages():
    exercises = [
        Exercise(datetime(2018, 1, 1, 8, 0), 3600, 10.0),
        Exercise(datetime(2018, 1, 3, 8, 0), 1800, 5.0),
    ]
    stats = Statistics(exercises)
    assert stats.total_exercises == 2
    assert stats.total_distance == pytest.approx(15.0)
    assert stats.total_duration == 5400
    assert stats.avg_speed == pytest.approx(10.0)

    avg = stats.avg_exercise
    assert avg.duration == 2700
    assert avg.distance == pytest.approx(7.5)
    assert avg.duration_to_string() == "00:45:00"
    assert avg.timestamp == datetime(2018, 1, 3, 8, 0)


def test_average_duration_rounds_down():
    exercises = [
        Exercise(datetime(2018, 1, 1), 100, 1.0),
        Exercise(datetime(2018, 1, 2), 101, 1.0),
    ]
    assert Statistics(exercises).avg_exercise.duration == 100


def test_average_speed_is_total_distance_over_total_time():
    # mean of per-exercise speeds would be (20 + 5) / 2 = 12.5
    exercises = [
        Exercise(datetime(2018, 1, 1), 1800, 10.0),
        Exercise(datetime(2018, 1, 2), 3600, 5.0),
    ]
    stats = Statistics(exercises)
    assert stats.avg_speed == pytest.approx(15.0 / 1.5)
    assert stats.avg_exercise.avg_speed() == pytest.approx(10.0)


def test_zero_duration_exercises_do_not_divide_by_zero():
    stats = Statistics([Exercise(datetime(2018, 1, 1), 0, 2.0)])
    assert stats.avg_speed == 0.0
    assert stats.avg_exercise.distance == pytest.approx(2.0)


def test_total_distance_is_order_independent():
    rng = random.Random(11)
    start = datetime(2018, 1, 1)
    exercises = [
        Exercise(start + timedelta(days=i), rng.randint(60, 7200), round(rng.uniform(0, 42.2), 2))
        for i in range(50)
    ]
    expected = math.fsum(e.distance for e in exercises)

    shuffled = list(exercises)
    rng.shuffle(shuffled)
    assert Statistics(exercises).total_distance == pytest.approx(expected)
    assert Statistics(shuffled).total_distance == pytest.approx(expected)


def test_to_dict():
    stats = Statistics([Exercise(datetime(2018, 1, 1), 3600, 10.0)])
    data = stats.to_dict()
    assert data["total_exercises"] == 1
    assert data["total_duration"] == "01:00:00"
    assert data["avg_speed_kmh"] == 10.0
    assert data["avg_distance_km"] == 10.0
