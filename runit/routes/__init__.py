# runit/routes/__init__.py
from flask import current_app, jsonify
from flask_jwt_extended import get_jwt_identity

from ..dao import SqlAlchemyStore
from ..domain import (
    ExerciseNotFound,
    Logic,
    NotLoggedIn,
    ParseError,
    Session,
    StorageError,
    ValidationError,
)


def current_logic() -> Logic:
    """
    Logic bound to the user named by the request's bearer token.

    Call from inside a @jwt_required() view.
    """
    store = SqlAlchemyStore()
    try:
        user_id = int(get_jwt_identity())
    except (TypeError, ValueError):
        raise NotLoggedIn("invalid token identity") from None

    user = store.find_user_by_id(user_id)
    if user is None:
        raise NotLoggedIn("user not found")
    return Logic(store, Session(user))


def register_error_handlers(app):
    @app.errorhandler(ValidationError)
    @app.errorhandler(ParseError)
    def bad_input(e):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(NotLoggedIn)
    def not_logged_in(e):
        return jsonify({"message": "not logged in", "error": str(e)}), 401

    @app.errorhandler(ExerciseNotFound)
    def exercise_not_found(e):
        return jsonify({"message": "exercise not found"}), 404

    @app.errorhandler(StorageError)
    def storage_error(e):
        current_app.logger.exception(f"Storage error: {e}")
        return jsonify({"message": "Internal server error"}), 500
