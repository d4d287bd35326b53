from flask import Blueprint, jsonify, get_flashed_messages

home_bp = Blueprint("main", __name__)


@home_bp.route("/", methods=["GET"])
def home():
    messages = [
        {"category": category, "msg": message}
        for category, message in get_flashed_messages(with_categories=True)
    ]
    return jsonify({"msg": "Golf team manager", "messages": messages}), 200
