# runit/domain/__init__.py
from .errors import (
    ConflictError,
    ExerciseNotFound,
    NotLoggedIn,
    ParseError,
    RunitError,
    StorageError,
    ValidationError,
)
from .exercise import Exercise
from .logic import AuthResult, Logic
from .session import Session
from .statistics import AverageExercise, Statistics
from .user import User

__all__ = [
    "AuthResult",
    "AverageExercise",
    "ConflictError",
    "Exercise",
    "ExerciseNotFound",
    "Logic",
    "NotLoggedIn",
    "ParseError",
    "RunitError",
    "Session",
    "Statistics",
    "StorageError",
    "User",
    "ValidationError",
]
