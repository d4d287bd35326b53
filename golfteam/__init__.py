import logging

from flask import Flask, jsonify, redirect, url_for, flash
from flask_cors import CORS

from golfteam.config import config
from golfteam.errors import AccessDenied, DeleteRestricted, EntityNotFound, ProfileMissing, ValidationFailed
from golfteam.extensions import db, ma, jwt, migrate, limiter

# Where a caller lacking a linked profile is sent to create one
PROFILE_REGISTRATION = {
    "coach": ("coaches.create_form", None),
    "partner": ("partners.create_form", None),
    "athlete": ("main.home", "No athlete profile found. Please contact your coach."),
}


def register_error_handlers(app):
    @app.errorhandler(ValidationFailed)
    def validation_failed(error):
        return jsonify({"msg": error.message, "errors": error.errors, "data": error.data}), 400

    @app.errorhandler(EntityNotFound)
    def entity_not_found(error):
        return jsonify({"msg": error.message}), 404

    @app.errorhandler(AccessDenied)
    def access_denied(error):
        app.logger.warning("Access denied: %s", error.message)
        return jsonify({"msg": error.message}), 403

    @app.errorhandler(DeleteRestricted)
    def delete_restricted(error):
        return jsonify({"msg": error.message, "dependents": error.dependents}), 409

    @app.errorhandler(ProfileMissing)
    def profile_missing(error):
        endpoint, message = PROFILE_REGISTRATION[error.profile]
        flash(message or error.message, "warning")
        return redirect(url_for(endpoint))


def register_jwt_callbacks():
    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"msg": "Token has expired"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return jsonify({"msg": "Invalid token"}), 401

    @jwt.unauthorized_loader
    def unauthorized_callback(error):
        return jsonify({"msg": "Missing authorization"}), 401


def create_app(config_name=None):
    app = Flask(__name__)
    if config_name is None or isinstance(config_name, str):
        app.config.from_object(config[config_name or "default"])
    else:
        app.config.from_object(config_name)

    app.logger.setLevel(getattr(logging, app.config.get("LOG_LEVEL", "INFO").upper(), logging.INFO))

    db.init_app(app)
    ma.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    CORS(app, resources={r"/*": {
        "origins": app.config["CORS_ORIGINS"],
        "allow_headers": ["Content-Type", "Authorization"],
        "methods": ["GET", "POST", "OPTIONS"],
    }}, supports_credentials=True)

    register_jwt_callbacks()
    register_error_handlers(app)

    from golfteam.routes.home import home_bp
    from golfteam.routes.auth import auth_bp
    from golfteam.routes.athletes import athletes_bp
    from golfteam.routes.partners import partners_bp
    from golfteam.routes.coaches import coaches_bp
    from golfteam.routes.golf_events import golf_events_bp
    from golfteam.routes.event_scores import event_scores_bp
    from golfteam.routes.dashboard import dashboard_bp

    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(athletes_bp, url_prefix="/athletes")
    app.register_blueprint(partners_bp, url_prefix="/partners")
    app.register_blueprint(coaches_bp, url_prefix="/coaches")
    app.register_blueprint(golf_events_bp, url_prefix="/events")
    app.register_blueprint(event_scores_bp, url_prefix="/scores")
    app.register_blueprint(dashboard_bp, url_prefix="/dashboard")

    from golfteam.commands import register_commands
    register_commands(app)

    return app
