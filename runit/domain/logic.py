# runit/domain/logic.py
import enum
import logging
import math
import re
from datetime import datetime
from typing import List, Optional

from .errors import ConflictError, ExerciseNotFound, NotLoggedIn, ParseError
from .exercise import Exercise
from .session import Session
from .statistics import Statistics
from .user import User

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 2
CREDENTIAL_MAX_LENGTH = 32

_TIMESTAMP_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d %H:%M:%S")
_DURATION_RE = re.compile(r"^(\d+):([0-5]?\d):([0-5]?\d)$")


class AuthResult(enum.Enum):
    """Outcome of login/signup. These are answers, not failures."""

    LOGIN_SUCCESSFUL = "Login successful"
    INVALID_CREDENTIALS = "invalid credentials"
    TOO_SHORT = "username or password too short"
    TOO_LONG = "username or password too long"
    USERNAME_TAKEN = "Username taken"

    @property
    def ok(self) -> bool:
        return self is AuthResult.LOGIN_SUCCESSFUL

    @property
    def message(self) -> str:
        return self.value


class Logic:
    """
    Application logic for one session.

    `store` is the persistence collaborator (see runit.dao.Store). Storage
    errors propagate to the caller untouched and never change the session.
    """

    def __init__(self, store, session: Optional[Session] = None):
        self.store = store
        self.session = session if session is not None else Session()

    # ------------------------------
    # Session
    # ------------------------------
    def login_user(self, username: str, password: str) -> AuthResult:
        user = self.store.find_user_by_username(username)
        if user is None:
            logger.info("login: user %r not found", username)
            return AuthResult.INVALID_CREDENTIALS
        if user.password != password:
            logger.info("login: bad password for %r", username)
            return AuthResult.INVALID_CREDENTIALS

        self.session.login(user)
        logger.info("login: %r logged in", username)
        return AuthResult.LOGIN_SUCCESSFUL

    def signup_user(self, username: str, password: str) -> AuthResult:
        if len(username) < USERNAME_MIN_LENGTH or len(password) < PASSWORD_MIN_LENGTH:
            return AuthResult.TOO_SHORT
        if len(username) > CREDENTIAL_MAX_LENGTH or len(password) > CREDENTIAL_MAX_LENGTH:
            return AuthResult.TOO_LONG

        if self.store.find_user_by_username(username) is not None:
            return AuthResult.USERNAME_TAKEN

        try:
            user = self.store.create_user(User(username, password))
        except ConflictError:
            return AuthResult.USERNAME_TAKEN

        self.session.login(user)
        logger.info("signup: created user %r", username)
        return AuthResult.LOGIN_SUCCESSFUL

    def logout(self) -> None:
        user = self.session.logout()
        if user is not None:
            logger.info("logged out user %r", user.username)

    def get_user(self) -> Optional[User]:
        return self.session.user

    def _require_user(self) -> User:
        user = self.session.user
        if user is None:
            raise NotLoggedIn("log in first")
        return user

    # ------------------------------
    # Exercises
    # ------------------------------
    def add_exercise(self, exercise: Exercise) -> Exercise:
        user = self._require_user()
        return self.store.create_exercise(exercise, user)

    def delete_exercise(self, exercise: Exercise) -> None:
        """
        Delete by storage id when the exercise has one, otherwise the first
        stored exercise equal to it by value. Raises ExerciseNotFound.
        """
        user = self._require_user()
        target = None
        for stored in self.store.find_exercises_by_user(user):
            if exercise.id is not None:
                if stored.id == exercise.id:
                    target = stored
                    break
            elif (stored.timestamp, stored.duration, stored.distance) == (
                exercise.timestamp,
                exercise.duration,
                exercise.distance,
            ):
                target = stored
                break

        if target is None or not self.store.delete_exercise(target):
            raise ExerciseNotFound(f"no such exercise: {exercise}")

    def get_history(self) -> List[Exercise]:
        """The current user's exercises, newest first."""
        user = self._require_user()
        return self.store.find_exercises_by_user(user)

    def get_statistics(self) -> Statistics:
        return Statistics(self.get_history())

    # ------------------------------
    # Form input
    # ------------------------------
    def create_timestamp(self, text: str) -> datetime:
        """'yyyy-MM-dd HH:mm' (seconds optional) -> datetime."""
        if not isinstance(text, str):
            raise ParseError(f"invalid date/time: {text!r}")
        cleaned = " ".join(text.split())
        for fmt in _TIMESTAMP_FORMATS:
            try:
                return datetime.strptime(cleaned, fmt)
            except ValueError:
                continue
        raise ParseError(f"invalid date/time: {text!r}, expected yyyy-MM-dd HH:mm")

    def create_duration(self, text: str) -> int:
        """'HH:MM:SS' -> total seconds."""
        match = _DURATION_RE.match(text.strip()) if isinstance(text, str) else None
        if not match:
            raise ParseError(f"invalid duration: {text!r}, expected HH:MM:SS")
        hours, minutes, seconds = (int(g) for g in match.groups())
        return hours * 3600 + minutes * 60 + seconds

    def create_distance(self, text: str) -> float:
        """Decimal kilometres; a comma is accepted as the decimal separator."""
        try:
            distance = float(str(text).strip().replace(",", "."))
        except ValueError:
            raise ParseError(f"invalid distance: {text!r}") from None
        if not math.isfinite(distance) or distance < 0:
            raise ParseError(f"invalid distance: {text!r}")
        return distance

    def create_exercise(self, date: str, time: str, duration: str, distance: str) -> Exercise:
        """Build an Exercise from the raw text fields of the entry form."""
        return Exercise(
            timestamp=self.create_timestamp(f"{date} {time}"),
            duration=self.create_duration(duration),
            distance=self.create_distance(distance),
        )
