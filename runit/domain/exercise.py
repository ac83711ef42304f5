# runit/domain/exercise.py
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from .errors import ValidationError
from .user import User

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

# accepted when a timestamp arrives as text (storage rows, form input)
_TIMESTAMP_INPUT_FORMATS = (
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
)


def parse_timestamp(value) -> Optional[datetime]:
    """Return a second-precision datetime, or None if `value` isn't one."""
    if isinstance(value, datetime):
        return value.replace(microsecond=0)
    if isinstance(value, str):
        text = value.strip()
        for fmt in _TIMESTAMP_INPUT_FORMATS:
            try:
                return datetime.strptime(text, fmt).replace(microsecond=0)
            except ValueError:
                continue
    return None


def format_duration(seconds: int) -> str:
    """HH:MM:SS, zero padded; the hour field grows past 99 instead of wrapping."""
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


@dataclass(frozen=True)
class Exercise:
    """
    One logged workout.

    `duration` is whole seconds and `distance` kilometres. Equality is by
    value (timestamp, duration, distance, owner); the storage id is ignored.
    """

    timestamp: datetime
    duration: int
    distance: float
    user: Optional[User] = None
    id: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        timestamp = parse_timestamp(self.timestamp)
        if timestamp is None:
            raise ValidationError(f"invalid timestamp: {self.timestamp!r}")

        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise ValidationError(f"duration must be whole seconds, got {self.duration!r}")
        if self.duration < 0:
            raise ValidationError("duration must not be negative")

        try:
            distance = float(self.distance)
        except (TypeError, ValueError):
            raise ValidationError(f"invalid distance: {self.distance!r}") from None
        if not math.isfinite(distance) or distance < 0:
            raise ValidationError("distance must be a non-negative number")

        object.__setattr__(self, "timestamp", timestamp)
        object.__setattr__(self, "distance", distance)

    def avg_speed(self) -> float:
        """km/h; 0.0 for a zero-length exercise so it can always be displayed."""
        if self.duration == 0:
            return 0.0
        return self.distance / (self.duration / 3600.0)

    def duration_to_string(self) -> str:
        return format_duration(self.duration)

    def __str__(self):
        return (
            f"{self.timestamp.strftime(TIMESTAMP_FORMAT)}, "
            f"duration {self.duration_to_string()}, "
            f"avgSpeed {self.avg_speed():.2f} km/h, "
            f"distance {self.distance:.2f} km"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "duration_seconds": self.duration,
            "duration": self.duration_to_string(),
            "distance_km": round(self.distance, 2),
            "avg_speed_kmh": round(self.avg_speed(), 2),
            "summary": str(self),
        }
