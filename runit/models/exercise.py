# runit/models/exercise.py
from .. import db
from ..domain.exercise import Exercise


class ExerciseRecord(db.Model):
    __tablename__ = "exercises"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    timestamp = db.Column(db.DateTime, nullable=False)

    duration_seconds = db.Column(db.Integer, nullable=False, default=0)
    distance_km = db.Column(db.Float, nullable=False, default=0.0)

    def to_entity(self, owner=None) -> Exercise:
        return Exercise(
            timestamp=self.timestamp,
            duration=int(self.duration_seconds or 0),
            distance=float(self.distance_km or 0.0),
            user=owner if owner is not None else self.user.to_entity(),
            id=self.id,
        )
