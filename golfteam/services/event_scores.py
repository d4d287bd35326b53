from types import SimpleNamespace

from flask import current_app

from golfteam import policy
from golfteam.extensions import db
from golfteam.models import Athlete, EventScore, GolfEvent, Partner
from golfteam.models.user import PARTNER
from golfteam.schemas import EventScoreSchema
from .base import (
    apply_changes, as_int, authorize_target, require_reference,
    save_changes, save_new, validate,
)

ENTITY = "event_score"
score_schema = EventScoreSchema()


def list_scores(caller):
    rule = policy.authorize(caller, ENTITY, policy.LIST)
    query = EventScore.query.join(Athlete, EventScore.athlete_id == Athlete.id)
    if rule.scope:
        query = query.filter(rule.scope(caller))
    return query.order_by(EventScore.timestamp.desc(), EventScore.id.desc()).all()


def get_score(caller, score_id):
    rule, score = authorize_target(caller, ENTITY, policy.DETAILS, EventScore, score_id)
    return score


def form_choices(caller, rule):
    """Athletes, events and entering partners the caller may pick from."""
    athletes = Athlete.query
    partners = Partner.query
    if rule.scope:
        athletes = athletes.filter(rule.scope(caller))
    if rule.role == PARTNER:
        partners = partners.filter(Partner.id == caller.partner_id)
    return {
        "athletes": athletes.order_by(Athlete.name).all(),
        "events": GolfEvent.query.order_by(GolfEvent.event_date).all(),
        "partners": partners.order_by(Partner.name).all(),
    }


def create_form(caller):
    rule = policy.authorize(caller, ENTITY, policy.CREATE)
    return form_choices(caller, rule)


def _validate_references(data):
    require_reference(Athlete, data["athlete_id"], "athlete_id", "Athlete")
    require_reference(GolfEvent, data["event_id"], "event_id", "Event")
    require_reference(Partner, data["entered_by_partner_id"], "entered_by_partner_id", "Partner")


def create_score(caller, submitted):
    policy.authorize(caller, ENTITY, policy.CREATE)

    athlete_id = as_int(submitted.get("athlete_id"))
    athlete = db.session.get(Athlete, athlete_id) if athlete_id is not None else None
    rule = policy.authorize(caller, ENTITY, policy.CREATE, SimpleNamespace(athlete=athlete))

    data = validate(score_schema, policy.merge_submission(rule, caller, submitted))
    _validate_references(data)

    score = EventScore(**data)
    apply_changes(score, policy.server_values(rule, caller))
    save_new(score)
    current_app.logger.info(
        "Score %s for athlete %s entered by partner %s", score.id, score.athlete_id, score.entered_by_partner_id
    )
    return score


def edit_form(caller, score_id):
    rule, score = authorize_target(caller, ENTITY, policy.EDIT, EventScore, score_id)
    return rule, score, form_choices(caller, rule)


def update_score(caller, score_id, submitted):
    rule, score = authorize_target(caller, ENTITY, policy.EDIT, EventScore, score_id, submitted)

    # timestamp is dump-only, so the stored value always survives
    state = policy.merge_submission(rule, caller, submitted, stored=score_schema.dump(score))
    data = validate(score_schema, state)
    _validate_references(data)

    apply_changes(score, data)
    save_changes(score, ENTITY)
    current_app.logger.info("Score %s updated by user %s as %s", score.id, caller.user_id, rule.role)
    return score


def delete_form(caller, score_id):
    rule, score = authorize_target(caller, ENTITY, policy.DELETE, EventScore, score_id)
    return score


def delete_score(caller, score_id):
    rule, score = authorize_target(caller, ENTITY, policy.DELETE, EventScore, score_id)
    db.session.delete(score)
    save_changes(score, ENTITY)
    current_app.logger.info("Score %s deleted by user %s", score_id, caller.user_id)
