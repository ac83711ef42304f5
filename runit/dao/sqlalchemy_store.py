# runit/dao/sqlalchemy_store.py
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .. import db
from ..domain.errors import ConflictError, StorageError
from ..domain.exercise import Exercise
from ..domain.user import User
from ..models.exercise import ExerciseRecord
from ..models.user import UserRecord

logger = logging.getLogger(__name__)


class SqlAlchemyStore:
    """
    Store backed by a SQLAlchemy session (Flask-SQLAlchemy's `db.session`
    unless another is given). Needs an app context for the default.

    Every failure is rolled back and re-raised as StorageError.
    """

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    # ------------------------------
    # Users
    # ------------------------------
    def find_user_by_username(self, username: str) -> Optional[User]:
        try:
            row = self.session.query(UserRecord).filter_by(username=username).first()
        except SQLAlchemyError as e:
            raise self._fail("find_user_by_username", e) from e
        return row.to_entity() if row else None

    def find_user_by_id(self, user_id: int) -> Optional[User]:
        try:
            row = self.session.get(UserRecord, user_id)
        except SQLAlchemyError as e:
            raise self._fail("find_user_by_id", e) from e
        return row.to_entity() if row else None

    def create_user(self, user: User) -> User:
        row = UserRecord(username=user.username, password=user.password)
        try:
            self.session.add(row)
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError(f"username already in use: {user.username!r}")
        except SQLAlchemyError as e:
            raise self._fail("create_user", e) from e
        return row.to_entity()

    # ------------------------------
    # Exercises
    # ------------------------------
    def find_exercises_by_user(self, user: User) -> List[Exercise]:
        try:
            owner = self._user_row(user)
            if owner is None:
                return []
            rows = (
                self.session.query(ExerciseRecord).filter_by(user_id=owner.id)
                .order_by(ExerciseRecord.timestamp.desc(), ExerciseRecord.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            raise self._fail("find_exercises_by_user", e) from e

        entity = owner.to_entity()
        return [row.to_entity(owner=entity) for row in rows]

    def create_exercise(self, exercise: Exercise, user: User) -> Exercise:
        try:
            owner = self._user_row(user)
            if owner is None:
                raise StorageError(f"unknown user {user.username!r}")

            row = ExerciseRecord(
                user_id=owner.id,
                timestamp=exercise.timestamp,
                duration_seconds=exercise.duration,
                distance_km=exercise.distance,
            )
            self.session.add(row)
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("create_exercise", e) from e

        return row.to_entity(owner=owner.to_entity())

    def delete_exercise(self, exercise: Exercise) -> bool:
        if exercise.id is None:
            return False
        try:
            query = self.session.query(ExerciseRecord).filter_by(id=exercise.id)
            if exercise.user is not None:
                owner = self._user_row(exercise.user)
                if owner is None:
                    return False
                query = query.filter_by(user_id=owner.id)
            row = query.first()
            if row is None:
                return False
            self.session.delete(row)
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete_exercise", e) from e
        return True

    # ------------------------------
    # Helpers
    # ------------------------------
    def _user_row(self, user: User) -> Optional[UserRecord]:
        if user.id is not None:
            row = self.session.get(UserRecord, user.id)
            if row is not None and row.username == user.username:
                return row
        return self.session.query(UserRecord).filter_by(username=user.username).first()

    def _fail(self, operation: str, error: Exception) -> StorageError:
        self.session.rollback()
        # traceback is logged once, by the request error handler
        logger.error("storage error in %s: %s", operation, error)
        return StorageError(f"{operation} failed: {error}")
