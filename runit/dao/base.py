# runit/dao/base.py
from typing import List, Optional, Protocol

from ..domain.exercise import Exercise
from ..domain.user import User


class Store(Protocol):
    """What Logic needs from persistence."""

    def find_user_by_username(self, username: str) -> Optional[User]: ...

    def find_user_by_id(self, user_id: int) -> Optional[User]: ...

    def create_user(self, user: User) -> User:
        """Raises ConflictError if the username exists."""
        ...

    def find_exercises_by_user(self, user: User) -> List[Exercise]:
        """Newest first."""
        ...

    def create_exercise(self, exercise: Exercise, user: User) -> Exercise: ...

    def delete_exercise(self, exercise: Exercise) -> bool: ...
