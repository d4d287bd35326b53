from flask import current_app

from golfteam import policy
from golfteam.extensions import db
from golfteam.models import Coach, GolfEvent
from golfteam.schemas import GolfEventSchema
from .base import (
    apply_changes, authorize_target, require_reference,
    save_changes, save_new, validate,
)

ENTITY = "golf_event"
event_schema = GolfEventSchema()


def list_events(caller):
    policy.authorize(caller, ENTITY, policy.LIST)
    return GolfEvent.query.order_by(GolfEvent.event_date, GolfEvent.start_time).all()


def get_event(caller, event_id):
    rule, event = authorize_target(caller, ENTITY, policy.DETAILS, GolfEvent, event_id)
    return event


def coach_choices(caller):
    return Coach.query.order_by(Coach.name).all()


def create_form(caller):
    policy.authorize(caller, ENTITY, policy.CREATE)
    return coach_choices(caller)


def create_event(caller, submitted):
    rule = policy.authorize(caller, ENTITY, policy.CREATE)
    data = validate(event_schema, policy.merge_submission(rule, caller, submitted))
    require_reference(Coach, data["created_by_coach_id"], "created_by_coach_id", "Coach")

    event = save_new(GolfEvent(**data))
    current_app.logger.info("Golf event %s created by user %s", event.id, caller.user_id)
    return event


def edit_form(caller, event_id):
    return authorize_target(caller, ENTITY, policy.EDIT, GolfEvent, event_id)


def update_event(caller, event_id, submitted):
    rule, event = authorize_target(caller, ENTITY, policy.EDIT, GolfEvent, event_id, submitted)

    state = policy.merge_submission(rule, caller, submitted, stored=event_schema.dump(event))
    data = validate(event_schema, state)
    require_reference(Coach, data["created_by_coach_id"], "created_by_coach_id", "Coach")

    apply_changes(event, data)
    save_changes(event, ENTITY)
    current_app.logger.info("Golf event %s updated by user %s as %s", event.id, caller.user_id, rule.role)
    return event


def delete_form(caller, event_id):
    rule, event = authorize_target(caller, ENTITY, policy.DELETE, GolfEvent, event_id)
    return event


def delete_event(caller, event_id):
    rule, event = authorize_target(caller, ENTITY, policy.DELETE, GolfEvent, event_id)

    for score in list(event.event_scores):
        db.session.delete(score)
    db.session.delete(event)
    save_changes(event, ENTITY)
    current_app.logger.info("Golf event %s deleted by user %s", event_id, caller.user_id)
