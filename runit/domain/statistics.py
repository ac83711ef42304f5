# runit/domain/statistics.py
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable, List

from .exercise import Exercise, format_duration

# timestamp of the zero-valued average exercise
EPOCH = datetime(1970, 1, 1)


@dataclass(frozen=True)
class AverageExercise(Exercise):
    """
    Exercise-shaped summary of a collection.

    Its speed is the aggregate speed of the whole collection rather than
    what its rounded-down duration would give.
    """

    speed: float = 0.0

    def avg_speed(self) -> float:
        return self.speed


class Statistics:
    """
    Totals and averages over a list of exercises.

    Averages:
      - duration: total duration // count (whole seconds, rounded down)
      - distance: total distance / count
      - speed:    total distance / total duration (in hours)

    An empty list gives zero totals and a zero-valued average exercise.
    """

    def __init__(self, exercises: Iterable[Exercise]):
        self._exercises: List[Exercise] = list(exercises)

    @property
    def exercises(self) -> List[Exercise]:
        return list(self._exercises)

    @property
    def total_exercises(self) -> int:
        return len(self._exercises)

    @property
    def total_distance(self) -> float:
        return float(sum(e.distance for e in self._exercises))

    @property
    def total_duration(self) -> int:
        return sum(e.duration for e in self._exercises)

    @property
    def avg_speed(self) -> float:
        total_duration = self.total_duration
        if total_duration == 0:
            return 0.0
        return self.total_distance / (total_duration / 3600.0)

    @property
    def avg_exercise(self) -> AverageExercise:
        count = self.total_exercises
        if count == 0:
            return AverageExercise(timestamp=EPOCH, duration=0, distance=0.0, speed=0.0)

        return AverageExercise(
            timestamp=max(e.timestamp for e in self._exercises),
            duration=self.total_duration // count,
            distance=self.total_distance / count,
            speed=self.avg_speed,
        )

    def to_dict(self) -> Dict[str, Any]:
        avg = self.avg_exercise
        return {
            "total_exercises": self.total_exercises,
            "total_distance_km": round(self.total_distance, 2),
            "total_duration_seconds": self.total_duration,
            "total_duration": format_duration(self.total_duration),
            "avg_speed_kmh": round(self.avg_speed, 2),
            "avg_duration_seconds": avg.duration,
            "avg_duration": avg.duration_to_string(),
            "avg_distance_km": round(avg.distance, 2),
        }
