# runit/domain/errors.py


class RunitError(Exception):
    """Base class for every error raised by the runit core."""


class ValidationError(RunitError, ValueError):
    """An entity was constructed from invalid values."""


class ParseError(RunitError, ValueError):
    """Text coming from a form field could not be parsed."""


class ConflictError(RunitError):
    """A record with the same unique key already exists."""


class NotLoggedIn(RunitError):
    """A user-data operation was attempted without an active session."""


class ExerciseNotFound(RunitError, LookupError):
    """The exercise to delete is not stored for the current user."""


class StorageError(RunitError):
    """The persistence layer failed; the operation did not complete."""
