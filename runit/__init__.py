# runit/__init__.py

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

from config import Config, database_uri

db = SQLAlchemy()
jwt = JWTManager()

DEMO_USERNAME = "test"
DEMO_PASSWORD = "pass"


def create_app(config_object=Config, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)

    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        app.config["SQLALCHEMY_DATABASE_URI"] = database_uri()

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)

    CORS(app, resources={r"/api/*": {"origins": "*"}})

    # -----------------------------
    # JWT error handlers
    # -----------------------------
    @jwt.unauthorized_loader
    def unauthorized_callback(reason):
        return jsonify({"message": "Missing or invalid auth token", "error": reason}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        return jsonify({"message": "Invalid auth token", "error": reason}), 422

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"message": "Token has expired"}), 401

    # -----------------------------
    # Blueprints
    # -----------------------------
    from .routes import register_error_handlers
    from .routes.auth_routes import auth_bp
    from .routes.exercise_routes import exercises_bp
    from .routes.statistics_routes import statistics_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(exercises_bp, url_prefix="/api/exercises")
    app.register_blueprint(statistics_bp, url_prefix="/api/statistics")

    register_error_handlers(app)

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    # -----------------------------
    # DB init
    # -----------------------------
    with app.app_context():
        init_database(app)

    return app


def init_database(app):
    """
    Create tables (idempotent) and the demo account.

    Failures are logged, not raised: the app still starts and the next
    request that touches storage reports the problem.
    """
    from . import models  # noqa: F401  (register tables)
    from .models.user import UserRecord

    try:
        db.create_all()
        if app.config.get("SEED_DEMO_USER") and not UserRecord.query.filter_by(username=DEMO_USERNAME).first():
            db.session.add(UserRecord(username=DEMO_USERNAME, password=DEMO_PASSWORD))
            db.session.commit()
            app.logger.info("created demo user %r", DEMO_USERNAME)
        return True
    except SQLAlchemyError:
        db.session.rollback()
        app.logger.exception("Incorrect database address: %s", app.config.get("SQLALCHEMY_DATABASE_URI"))
        return False
