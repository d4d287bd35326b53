import re

from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import set_access_cookies, unset_jwt_cookies

from golfteam import identity
from golfteam.extensions import db, limiter
from golfteam.models import User
from golfteam.schemas import UserSchema

auth_bp = Blueprint("auth", __name__)
user_schema = UserSchema()

EMAIL_REGEX = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'


def validate_password(password):
    """Validate password strength against the configured policy."""
    config = current_app.config
    if len(password) < config.get("PASSWORD_MIN_LENGTH", 8):
        return False, f"Password must be at least {config.get('PASSWORD_MIN_LENGTH', 8)} characters"
    if config.get("PASSWORD_REQUIRE_UPPERCASE") and not re.search(r"[A-Z]", password):
        return False, "Password must contain at least one uppercase letter"
    if config.get("PASSWORD_REQUIRE_LOWERCASE") and not re.search(r"[a-z]", password):
        return False, "Password must contain at least one lowercase letter"
    if config.get("PASSWORD_REQUIRE_NUMBERS") and not re.search(r"\d", password):
        return False, "Password must contain at least one number"
    if config.get("PASSWORD_REQUIRE_SPECIAL") and not re.search(r"[!@#$%^&*(),.?\":{}|<>]", password):
        return False, "Password must contain at least one special character"
    return True, "Password is valid"


@auth_bp.route("/register", methods=["POST"])
@limiter.limit("5 per hour")
def register():
    data = request.get_json(silent=True) or {}
    email = data.get("email", "").strip().lower()
    password = data.get("password", "")

    if not email or not password:
        return jsonify({"msg": "Email and password are required"}), 400

    if not re.match(EMAIL_REGEX, email):
        return jsonify({"msg": "Invalid email format"}), 400

    is_valid, msg = validate_password(password)
    if not is_valid:
        return jsonify({"msg": msg}), 400

    if User.query.filter_by(email=email).first():
        return jsonify({"msg": "Registration failed"}), 400

    user = User(email=email)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    current_app.logger.info("Registered user %s", user.id)

    return jsonify({"msg": "Registered successfully", "user": user_schema.dump(user)}), 201


@auth_bp.route("/login", methods=["POST"])
@limiter.limit("10 per 15 minutes")
def login():
    if not request.is_json:
        return jsonify({"msg": "Missing JSON"}), 400

    data = request.get_json()
    email = data.get("email", "").strip().lower()
    password = data.get("password", "")

    if not email or not password:
        return jsonify({"msg": "Email and password are required"}), 400

    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(password):
        current_app.logger.warning("Failed login for %s", email)
        return jsonify({"msg": "Invalid credentials"}), 401

    access_token = identity.issue_token(user.id)
    response = jsonify({
        "msg": "Login successful",
        "access_token": access_token,
        "user": user_schema.dump(user),
    })
    set_access_cookies(response, access_token)
    return response, 200


@auth_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify({"msg": "Logout successful"})
    unset_jwt_cookies(response)
    return response, 200
