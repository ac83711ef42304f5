# runit/models/__init__.py
from .exercise import ExerciseRecord
from .user import UserRecord

__all__ = ["ExerciseRecord", "UserRecord"]
