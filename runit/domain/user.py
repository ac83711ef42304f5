# runit/domain/user.py
from typing import Any, Dict, Optional


class User:
    """
    An account: username + password.

    No validation happens here; length rules are enforced by the signup
    flow before a User is built. Two users are the same user when their
    usernames match (case-sensitive).
    """

    def __init__(self, username: str, password: str, id: Optional[int] = None):
        self.username = username
        self.password = password
        self.id = id

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return self.username == other.username

    def __hash__(self):
        return hash(self.username)

    def __str__(self):
        return self.username

    def __repr__(self):
        return f"User(username={self.username!r}, id={self.id!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "username": self.username}
