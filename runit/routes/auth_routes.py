# runit/routes/auth_routes.py

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import create_access_token, jwt_required

from ..dao import SqlAlchemyStore
from ..domain import AuthResult, Logic, ParseError
from . import current_logic

auth_bp = Blueprint("auth", __name__)

_SIGNUP_STATUS = {
    AuthResult.TOO_SHORT: 400,
    AuthResult.TOO_LONG: 400,
    AuthResult.USERNAME_TAKEN: 409,
}


def _credentials():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        raise ParseError("expected a JSON object with username and password")

    username = data.get("username") or ""
    password = data.get("password") or ""  # do NOT strip passwords
    if not isinstance(username, str) or not isinstance(password, str):
        raise ParseError("username and password must be text")
    return username.strip(), password


def _token_response(logic: Logic, result: AuthResult, status: int):
    user = logic.get_user()
    access_token = create_access_token(identity=str(user.id))
    return jsonify({"token": access_token, "user": user.to_dict(), "message": result.message}), status


# -----------------------------
# Routes
# -----------------------------
@auth_bp.route("/signup", methods=["POST"])
def signup():
    username, password = _credentials()

    logic = Logic(SqlAlchemyStore())
    result = logic.signup_user(username, password)
    if not result.ok:
        current_app.logger.info(f"[auth/signup] rejected '{username}': {result.message}")
        return jsonify({"message": result.message}), _SIGNUP_STATUS.get(result, 400)

    return _token_response(logic, result, 201)


@auth_bp.route("/login", methods=["POST"])
def login():
    username, password = _credentials()

    # do not log password
    current_app.logger.info(f"[auth/login] username='{username}'")

    if not username or not password:
        return jsonify({"message": "username and password are required"}), 400

    logic = Logic(SqlAlchemyStore())
    result = logic.login_user(username, password)
    if not result.ok:
        return jsonify({"message": result.message}), 401

    return _token_response(logic, result, 200)


@auth_bp.route("/logout", methods=["POST"])
@jwt_required()
def logout():
    logic = current_logic()
    name = str(logic.get_user())
    logic.logout()
    current_app.logger.info(f"[auth/logout] logged out user '{name}'")
    return jsonify({"message": "logged out"}), 200


@auth_bp.route("/me", methods=["GET"])
@jwt_required()
def me():
    logic = current_logic()
    return jsonify({"user": logic.get_user().to_dict()}), 200
