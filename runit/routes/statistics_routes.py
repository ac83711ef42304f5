# runit/routes/statistics_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from . import current_logic

statistics_bp = Blueprint("statistics", __name__)


@statistics_bp.route("", methods=["GET"])
@jwt_required()
def statistics():
    """
    GET /api/statistics

    {
      "statistics": {
        "total_exercises": 2,
        "total_distance_km": 15.0,
        "total_duration_seconds": 5400,
        "total_duration": "01:30:00",
        "avg_speed_kmh": 10.0,
        "avg_duration_seconds": 2700,
        "avg_duration": "00:45:00",
        "avg_distance_km": 7.5
      }
    }
    """
    logic = current_logic()
    stats = logic.get_statistics()
    return jsonify({"statistics": stats.to_dict()}), 200
