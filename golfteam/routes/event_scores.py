from flask import Blueprint, jsonify, redirect, url_for, flash

from golfteam.schemas import AthleteSchema, EventScoreSchema, GolfEventSchema, PartnerSchema
from golfteam.services import event_scores
from golfteam.utils.decorators import with_caller, submitted_data

event_scores_bp = Blueprint("event_scores", __name__)

score_schema = EventScoreSchema()
scores_schema = EventScoreSchema(many=True)
athlete_choices_schema = AthleteSchema(many=True, only=("id", "name"))
event_choices_schema = GolfEventSchema(many=True, only=("id", "title"))
partner_choices_schema = PartnerSchema(many=True, only=("id", "name"))


def _dump_choices(choices):
    return {
        "athletes": athlete_choices_schema.dump(choices["athletes"]),
        "events": event_choices_schema.dump(choices["events"]),
        "partners": partner_choices_schema.dump(choices["partners"]),
    }


@event_scores_bp.route("/", methods=["GET"])
@with_caller
def index(caller):
    return jsonify({"scores": scores_schema.dump(event_scores.list_scores(caller))}), 200


@event_scores_bp.route("/<int:score_id>", methods=["GET"])
@with_caller
def details(score_id, caller):
    return jsonify(score_schema.dump(event_scores.get_score(caller, score_id))), 200


@event_scores_bp.route("/create", methods=["GET"])
@with_caller
def create_form(caller):
    return jsonify(_dump_choices(event_scores.create_form(caller))), 200


@event_scores_bp.route("/create", methods=["POST"])
@with_caller
def create(caller):
    event_scores.create_score(caller, submitted_data())
    flash("Score recorded.", "success")
    return redirect(url_for("event_scores.index"))


@event_scores_bp.route("/<int:score_id>/edit", methods=["GET"])
@with_caller
def edit_form(score_id, caller):
    rule, score, choices = event_scores.edit_form(caller, score_id)
    payload = _dump_choices(choices)
    payload["score"] = score_schema.dump(score)
    payload["editable_fields"] = sorted(rule.fields)
    return jsonify(payload), 200


@event_scores_bp.route("/<int:score_id>/edit", methods=["POST"])
@with_caller
def edit(score_id, caller):
    event_scores.update_score(caller, score_id, submitted_data())
    flash("Score updated.", "success")
    return redirect(url_for("event_scores.index"))


@event_scores_bp.route("/<int:score_id>/delete", methods=["GET"])
@with_caller
def delete_form(score_id, caller):
    return jsonify(score_schema.dump(event_scores.delete_form(caller, score_id))), 200


@event_scores_bp.route("/<int:score_id>/delete", methods=["POST"])
@with_caller
def delete(score_id, caller):
    event_scores.delete_score(caller, score_id)
    flash("Score deleted.", "success")
    return redirect(url_for("event_scores.index"))
