from flask import Blueprint, jsonify, redirect, url_for, flash

from golfteam.schemas import CoachSchema, GolfEventSchema
from golfteam.services import golf_events
from golfteam.utils.decorators import with_caller, submitted_data

golf_events_bp = Blueprint("golf_events", __name__)

event_schema = GolfEventSchema()
events_schema = GolfEventSchema(many=True)
coach_choices_schema = CoachSchema(many=True, only=("id", "name"))


@golf_events_bp.route("/", methods=["GET"])
@with_caller
def index(caller):
    return jsonify({"events": events_schema.dump(golf_events.list_events(caller))}), 200


@golf_events_bp.route("/<int:event_id>", methods=["GET"])
@with_caller
def details(event_id, caller):
    return jsonify(event_schema.dump(golf_events.get_event(caller, event_id))), 200


@golf_events_bp.route("/create", methods=["GET"])
@with_caller
def create_form(caller):
    coaches = golf_events.create_form(caller)
    return jsonify({"coaches": coach_choices_schema.dump(coaches)}), 200


@golf_events_bp.route("/create", methods=["POST"])
@with_caller
def create(caller):
    golf_events.create_event(caller, submitted_data())
    flash("Golf event created successfully!", "success")
    return redirect(url_for("golf_events.index"))


@golf_events_bp.route("/<int:event_id>/edit", methods=["GET"])
@with_caller
def edit_form(event_id, caller):
    rule, event = golf_events.edit_form(caller, event_id)
    return jsonify({
        "event": event_schema.dump(event),
        "editable_fields": sorted(rule.fields),
        "coaches": coach_choices_schema.dump(golf_events.coach_choices(caller)),
    }), 200


@golf_events_bp.route("/<int:event_id>/edit", methods=["POST"])
@with_caller
def edit(event_id, caller):
    golf_events.update_event(caller, event_id, submitted_data())
    flash("Golf event updated successfully!", "success")
    return redirect(url_for("golf_events.index"))


@golf_events_bp.route("/<int:event_id>/delete", methods=["GET"])
@with_caller
def delete_form(event_id, caller):
    return jsonify(event_schema.dump(golf_events.delete_form(caller, event_id))), 200


@golf_events_bp.route("/<int:event_id>/delete", methods=["POST"])
@with_caller
def delete(event_id, caller):
    golf_events.delete_event(caller, event_id)
    flash("Golf event deleted.", "success")
    return redirect(url_for("golf_events.index"))
