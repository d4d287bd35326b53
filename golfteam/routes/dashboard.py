from flask import Blueprint, jsonify, redirect, url_for, flash

from golfteam.schemas import AthleteSchema, EventScoreSchema, GolfEventSchema
from golfteam.services import dashboard
from golfteam.utils.decorators import with_caller

dashboard_bp = Blueprint("dashboard", __name__)

recent_events_schema = GolfEventSchema(many=True, only=("id", "title", "event_date", "location"))
events_schema = GolfEventSchema(many=True)
athlete_schema = AthleteSchema()
athletes_schema = AthleteSchema(many=True)
scores_schema = EventScoreSchema(many=True, exclude=("athlete",))


def _athlete_card(athlete):
    """Athlete with partner and scores, or None."""
    if athlete is None:
        return None
    data = athlete_schema.dump(athlete)
    data["event_scores"] = scores_schema.dump(athlete.event_scores)
    return data


@dashboard_bp.route("/", methods=["GET"])
@with_caller
def index(caller):
    endpoint = dashboard.destination(caller)
    if endpoint is None:
        flash("Your account has no role yet. Register a coach or partner profile to get started.", "info")
        return redirect(url_for("main.home"))
    return redirect(url_for(endpoint))


@dashboard_bp.route("/coach", methods=["GET"])
@with_caller
def coach_dashboard(caller):
    context = dashboard.coach_dashboard(caller)
    context["recent_events"] = recent_events_schema.dump(context["recent_events"])
    return jsonify(context), 200


@dashboard_bp.route("/partner", methods=["GET"])
@with_caller
def partner_dashboard(caller):
    context = dashboard.partner_dashboard(caller)
    return jsonify({
        "partner_name": context["partner_name"],
        "athlete": _athlete_card(context["athlete"]),
    }), 200


@dashboard_bp.route("/athlete", methods=["GET"])
@with_caller
def athlete_dashboard(caller):
    context = dashboard.athlete_dashboard(caller)
    return jsonify({"athlete": _athlete_card(context["athlete"])}), 200


@dashboard_bp.route("/admin", methods=["GET"])
@with_caller
def admin_dashboard(caller):
    context = dashboard.admin_dashboard(caller)
    context["recent_events"] = recent_events_schema.dump(context["recent_events"])
    return jsonify(context), 200


@dashboard_bp.route("/admin/data", methods=["GET"])
@with_caller
def admin_data(caller):
    context = dashboard.admin_data(caller)
    return jsonify({
        "athletes": [_athlete_card(athlete) for athlete in context["athletes"]],
        "events": events_schema.dump(context["events"]),
    }), 200
