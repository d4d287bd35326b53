from flask import Blueprint, jsonify, redirect, url_for, flash

from golfteam.models.user import COACH
from golfteam.schemas import CoachSchema, GolfEventSchema
from golfteam.services import coaches
from golfteam.utils.decorators import with_caller, submitted_data
from .profiles import after_registration

coaches_bp = Blueprint("coaches", __name__)

coach_schema = CoachSchema()
coaches_schema = CoachSchema(many=True)
events_schema = GolfEventSchema(many=True, only=("id", "title", "event_date"))


@coaches_bp.route("/", methods=["GET"])
@with_caller
def index(caller):
    return jsonify({"coaches": coaches_schema.dump(coaches.list_coaches(caller))}), 200


@coaches_bp.route("/<int:coach_id>", methods=["GET"])
@with_caller
def details(coach_id, caller):
    coach = coaches.get_coach(caller, coach_id)
    data = coach_schema.dump(coach)
    data["created_events"] = events_schema.dump(coach.created_events)
    return jsonify(data), 200


@coaches_bp.route("/create", methods=["GET"])
@with_caller
def create_form(caller):
    rule, existing = coaches.create_form(caller)
    if existing is not None:
        return redirect(url_for("coaches.details", coach_id=existing.id))
    return jsonify({"editable_fields": sorted(rule.fields), "self_registration": rule.binds_identity}), 200


@coaches_bp.route("/create", methods=["POST"])
@with_caller
def create(caller):
    registration = coaches.create_coach(caller, submitted_data())
    return after_registration(coaches.COACHES, registration, caller, "coaches", "dashboard.coach_dashboard")


@coaches_bp.route("/<int:coach_id>/edit", methods=["GET"])
@with_caller
def edit_form(coach_id, caller):
    rule, coach = coaches.edit_form(caller, coach_id)
    return jsonify({"coach": coach_schema.dump(coach), "editable_fields": sorted(rule.fields)}), 200


@coaches_bp.route("/<int:coach_id>/edit", methods=["POST"])
@with_caller
def edit(coach_id, caller):
    rule, coach = coaches.update_coach(caller, coach_id, submitted_data())
    flash("Coach profile updated successfully!", "success")
    if rule.role == COACH:
        return redirect(url_for("dashboard.coach_dashboard"))
    return redirect(url_for("coaches.index"))


@coaches_bp.route("/<int:coach_id>/delete", methods=["GET"])
@with_caller
def delete_form(coach_id, caller):
    return jsonify(coach_schema.dump(coaches.delete_form(caller, coach_id))), 200


@coaches_bp.route("/<int:coach_id>/delete", methods=["POST"])
@with_caller
def delete(coach_id, caller):
    coaches.delete_coach(caller, coach_id)
    flash("Coach deleted.", "success")
    return redirect(url_for("coaches.index"))
