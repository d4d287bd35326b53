from flask import current_app

from golfteam import identity, policy
from golfteam.extensions import db
from golfteam.models import Athlete, Partner, User
from golfteam.models.user import ATHLETE
from golfteam.schemas import AthleteSchema
from .base import (
    apply_changes, authorize_target, require_reference,
    save_changes, save_new, validate,
)

ENTITY = "athlete"
athlete_schema = AthleteSchema()


def list_athletes(caller):
    policy.authorize(caller, ENTITY, policy.LIST)
    return Athlete.query.order_by(Athlete.name).all()


def get_athlete(caller, athlete_id):
    rule, athlete = authorize_target(caller, ENTITY, policy.DETAILS, Athlete, athlete_id)
    return athlete


def partner_choices(caller):
    """Partners offered when creating or fully editing an athlete."""
    return Partner.query.order_by(Partner.name).all()


def create_form(caller):
    policy.authorize(caller, ENTITY, policy.CREATE)
    return partner_choices(caller)


def create_athlete(caller, submitted):
    rule = policy.authorize(caller, ENTITY, policy.CREATE)
    data = validate(athlete_schema, policy.merge_submission(rule, caller, submitted))
    require_reference(Partner, data["partner_id"], "partner_id", "Partner")
    if data.get("user_id") is not None:
        require_reference(User, data["user_id"], "user_id", "User")

    athlete = save_new(Athlete(**data))
    current_app.logger.info("Athlete %s created by user %s", athlete.id, caller.user_id)

    # Admin/Coach linking a login at creation time
    if athlete.user_id is not None:
        identity.link_profile(athlete.user_id, athlete, ATHLETE)
    return athlete


def edit_form(caller, athlete_id):
    return authorize_target(caller, ENTITY, policy.EDIT, Athlete, athlete_id)


def update_athlete(caller, athlete_id, submitted):
    rule, athlete = authorize_target(caller, ENTITY, policy.EDIT, Athlete, athlete_id, submitted)

    state = policy.merge_submission(rule, caller, submitted, stored=athlete_schema.dump(athlete))
    data = validate(athlete_schema, state)
    require_reference(Partner, data["partner_id"], "partner_id", "Partner")

    apply_changes(athlete, data)
    save_changes(athlete, ENTITY)
    current_app.logger.info("Athlete %s updated by user %s as %s", athlete.id, caller.user_id, rule.role)
    return athlete


def delete_form(caller, athlete_id):
    rule, athlete = authorize_target(caller, ENTITY, policy.DELETE, Athlete, athlete_id)
    return athlete


def delete_athlete(caller, athlete_id):
    rule, athlete = authorize_target(caller, ENTITY, policy.DELETE, Athlete, athlete_id)

    # Scores go with the athlete
    for score in list(athlete.event_scores):
        db.session.delete(score)
    db.session.delete(athlete)
    save_changes(athlete, ENTITY)
    current_app.logger.info("Athlete %s deleted by user %s", athlete_id, caller.user_id)
