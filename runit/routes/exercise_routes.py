# runit/routes/exercise_routes.py
from datetime import datetime

from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from ..domain import ParseError
from . import current_logic

exercises_bp = Blueprint("exercises", __name__)

# form defaults from the entry screen
DEFAULT_DURATION = "00:30:00"
DEFAULT_DISTANCE = "5.00"


def _field(data, key, default):
    value = data.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    return str(value)


@exercises_bp.route("", methods=["GET"])
@jwt_required()
def history():
    """
    GET /api/exercises

    The current user's exercises, newest first.
    """
    logic = current_logic()
    exercises = logic.get_history()
    return jsonify({"exercises": [e.to_dict() for e in exercises]}), 200


@exercises_bp.route("", methods=["POST"])
@jwt_required()
def add_exercise():
    """
    POST /api/exercises

    Body (all text, as typed into the form):
    {
      "date": "2018-01-31",
      "time": "10:10",
      "duration": "01:00:00",
      "distance": "10.00"
    }
    Missing fields fall back to now / 00:30:00 / 5.00.
    """
    logic = current_logic()
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ParseError("expected a JSON object with date, time, duration and distance")

    now = datetime.now()
    exercise = logic.create_exercise(
        date=_field(data, "date", now.strftime("%Y-%m-%d")),
        time=_field(data, "time", now.strftime("%H:%M")),
        duration=_field(data, "duration", DEFAULT_DURATION),
        distance=_field(data, "distance", DEFAULT_DISTANCE),
    )
    saved = logic.add_exercise(exercise)
    return jsonify({"exercise": saved.to_dict()}), 201


@exercises_bp.route("/<int:exercise_id>", methods=["DELETE"])
@jwt_required()
def delete_exercise(exercise_id):
    """
    DELETE /api/exercises/<id>
    """
    logic = current_logic()
    target = next((e for e in logic.get_history() if e.id == exercise_id), None)
    if target is None:
        return jsonify({"message": "exercise not found"}), 404

    logic.delete_exercise(target)
    return jsonify({"message": "exercise deleted", "exercise": target.to_dict()}), 200


