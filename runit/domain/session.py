# runit/domain/session.py
from typing import Optional

from .user import User


class Session:
    """
    Who is logged in right now: either nobody or exactly one user.

    Owned by a single Logic; the HTTP layer builds a fresh one per request.
    """

    def __init__(self, user: Optional[User] = None):
        self._user = user

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def is_logged_in(self) -> bool:
        return self._user is not None

    def login(self, user: User) -> None:
        self._user = user

    def logout(self) -> Optional[User]:
        """Return the user that was logged in, if any. Safe to call twice."""
        user, self._user = self._user, None
        return user

    def __repr__(self):
        if self._user is None:
            return "Session(logged out)"
        return f"Session(logged in as {self._user.username!r})"
