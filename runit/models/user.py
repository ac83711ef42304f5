# runit/models/user.py
from datetime import datetime

from .. import db
from ..domain.user import User


class UserRecord(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(32), unique=True, nullable=False)
    # stored as given; hashing is out of scope for this app
    password = db.Column(db.String(32), nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    exercises = db.relationship(
        "ExerciseRecord",
        backref="user",
        cascade="all, delete-orphan",
    )

    def to_entity(self) -> User:
        return User(username=self.username, password=self.password, id=self.id)
