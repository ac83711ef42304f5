from datetime import datetime

import pytest

from runit.domain import Exercise, User, ValidationError
from runit.domain.logic import Logic


def test_to_string_format():
    exercise = Exercise(datetime(2018, 1, 31, 10, 10, 10), 3600, 10.00)
    assert str(exercise) == "2018-01-31 10:10, duration 01:00:00, avgSpeed 10.00 km/h, distance 10.00 km"


def test_avg_speed_one_hour_ten_km():
    exercise = Exercise(datetime(2018, 1, 31, 10, 10), 3600, 10.00)
    assert exercise.avg_speed() == pytest.approx(10.00)


def test_avg_speed_half_hour():
    exercise = Exercise(datetime(2018, 1, 31, 10, 10), 1800, 5.0)
    assert exercise.avg_speed() == pytest.approx(10.0)


def test_zero_duration_has_zero_speed():
    exercise = Exercise(datetime(2018, 1, 31, 10, 10), 0, 3.0)
    assert exercise.avg_speed() == 0.0
    assert "avgSpeed 0.00 km/h" in str(exercise)


def test_duration_to_string_pads_and_does_not_cap_hours():
    ts = datetime(2018, 1, 31)
    assert Exercise(ts, 5, 0).duration_to_string() == "00:00:05"
    assert Exercise(ts, 3661, 0).duration_to_string() == "01:01:01"
    assert Exercise(ts, 123 * 3600 + 4 * 60 + 5, 0).duration_to_string() == "123:04:05"


@pytest.mark.parametrize("text", ["00:00:00", "00:30:00", "01:00:00", "12:34:56", "99:59:59"])
def test_duration_text_round_trip(text):
    seconds = Logic(store=None).create_duration(text)
    assert Exercise(datetime(2018, 1, 31), seconds, 1.0).duration_to_string() == text


def test_timestamp_is_truncated_to_seconds():
    exercise = Exercise(datetime(2018, 1, 31, 10, 10, 10, 999), 60, 1.0)
    assert exercise.timestamp == datetime(2018, 1, 31, 10, 10, 10)


def test_timestamp_accepts_text():
    exercise = Exercise("2018-01-31 10:10:10", 60, 1.0)
    assert exercise.timestamp == datetime(2018, 1, 31, 10, 10, 10)


@pytest.mark.parametrize(
    "timestamp, duration, distance",
    [
        (datetime(2018, 1, 31), -1, 1.0),
        (datetime(2018, 1, 31), 60, -0.5),
        (datetime(2018, 1, 31), 60, float("nan")),
        (datetime(2018, 1, 31), 60.5, 1.0),
        (datetime(2018, 1, 31), 60, "far"),
        ("2018-02-31 10:00", 60, 1.0),
        ("yesterday", 60, 1.0),
        (None, 60, 1.0),
    ],
)
def test_invalid_values_raise_validation_error(timestamp, duration, distance):
    with pytest.raises(ValidationError):
        Exercise(timestamp, duration, distance)


def test_equality_is_by_value_not_storage_id():
    ts = datetime(2018, 1, 31, 10, 10)
    a = Exercise(ts, 3600, 10.0, id=1)
    b = Exercise(ts, 3600, 10.0, id=2)
    c = Exercise(ts, 3600, 10.5, id=1)
    assert a == b
    assert a != c


def test_equality_includes_owner():
    ts = datetime(2018, 1, 31, 10, 10)
    alice = Exercise(ts, 3600, 10.0, user=User("alice", "pw"))
    bob = Exercise(ts, 3600, 10.0, user=User("bob", "pw"))
    assert alice != bob
    assert alice == Exercise(ts, 3600, 10.0, user=User("alice", "other"))


def test_exercise_is_immutable():
    exercise = Exercise(datetime(2018, 1, 31), 60, 1.0)
    with pytest.raises(AttributeError):
        exercise.duration = 120


def test_to_dict():
    exercise = Exercise(datetime(2018, 1, 31, 10, 10, 10), 3600, 10.0, id=7)
    data = exercise.to_dict()
    assert data["id"] == 7
    assert data["timestamp"] == "2018-01-31T10:10:10"
    assert data["duration"] == "01:00:00"
    assert data["avg_speed_kmh"] == 10.0
    assert data["summary"] == str(exercise)


def test_user_identity_is_username():
    assert User("runner", "a") == User("runner", "b")
    assert User("runner", "a") != User("Runner", "a")
    assert str(User("runner", "a")) == "runner"
    assert "password" not in User("runner", "a", id=3).to_dict()
