from flask import Blueprint, jsonify, redirect, url_for, flash

from golfteam.schemas import AthleteSchema, EventScoreSchema, PartnerSchema
from golfteam.services import athletes
from golfteam.utils.decorators import with_caller, submitted_data

athletes_bp = Blueprint("athletes", __name__)

athlete_schema = AthleteSchema()
athletes_schema = AthleteSchema(many=True)
scores_schema = EventScoreSchema(many=True, exclude=("athlete",))
partner_choices_schema = PartnerSchema(many=True, only=("id", "name"))


def _athlete_with_scores(athlete):
    data = athlete_schema.dump(athlete)
    data["event_scores"] = scores_schema.dump(athlete.event_scores)
    return data


@athletes_bp.route("/", methods=["GET"])
@with_caller
def index(caller):
    return jsonify({"athletes": athletes_schema.dump(athletes.list_athletes(caller))}), 200


@athletes_bp.route("/<int:athlete_id>", methods=["GET"])
@with_caller
def details(athlete_id, caller):
    return jsonify(_athlete_with_scores(athletes.get_athlete(caller, athlete_id))), 200


@athletes_bp.route("/create", methods=["GET"])
@with_caller
def create_form(caller):
    partners = athletes.create_form(caller)
    return jsonify({"partners": partner_choices_schema.dump(partners)}), 200


@athletes_bp.route("/create", methods=["POST"])
@with_caller
def create(caller):
    athletes.create_athlete(caller, submitted_data())
    flash("Athlete created successfully!", "success")
    return redirect(url_for("athletes.index"))


@athletes_bp.route("/<int:athlete_id>/edit", methods=["GET"])
@with_caller
def edit_form(athlete_id, caller):
    rule, athlete = athletes.edit_form(caller, athlete_id)
    # Partners get the reduced ratings/picture form
    partner_edit_mode = "partner_id" not in rule.fields
    payload = {
        "athlete": athlete_schema.dump(athlete),
        "editable_fields": sorted(rule.fields),
        "partner_edit_mode": partner_edit_mode,
    }
    if not partner_edit_mode:
        payload["partners"] = partner_choices_schema.dump(athletes.partner_choices(caller))
    return jsonify(payload), 200


@athletes_bp.route("/<int:athlete_id>/edit", methods=["POST"])
@with_caller
def edit(athlete_id, caller):
    athletes.update_athlete(caller, athlete_id, submitted_data())
    flash("Athlete updated successfully!", "success")
    return redirect(url_for("athletes.index"))


@athletes_bp.route("/<int:athlete_id>/delete", methods=["GET"])
@with_caller
def delete_form(athlete_id, caller):
    return jsonify(athlete_schema.dump(athletes.delete_form(caller, athlete_id))), 200


@athletes_bp.route("/<int:athlete_id>/delete", methods=["POST"])
@with_caller
def delete(athlete_id, caller):
    athletes.delete_athlete(caller, athlete_id)
    flash("Athlete deleted.", "success")
    return redirect(url_for("athletes.index"))
