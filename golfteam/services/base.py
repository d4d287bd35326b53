"""Persistence helpers shared by the entity services."""
from flask import current_app
from marshmallow import ValidationError
from sqlalchemy.orm.exc import StaleDataError

from golfteam import policy
from golfteam.errors import ConcurrencyConflict, EntityNotFound, ValidationFailed
from golfteam.extensions import db


def as_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def load_or_404(model, entity_id, entity):
    obj = db.session.get(model, entity_id) if entity_id is not None else None
    if obj is None:
        raise EntityNotFound(entity, entity_id)
    return obj


def check_body_id(entity_id, submitted, entity):
    """A body id that disagrees with the path id is treated as a missing row."""
    body_id = submitted.get("id")
    if body_id not in (None, "") and as_int(body_id) != entity_id:
        raise EntityNotFound(entity, entity_id)


def authorize_target(caller, entity, action, model, entity_id, submitted=None):
    """Role gate, then load the row, then the ownership check on that row.

    A submitted body is checked against the path id once the role is known
    to be allowed at all.
    """
    policy.authorize(caller, entity, action)
    if submitted is not None:
        check_body_id(entity_id, submitted, entity)
    target = load_or_404(model, entity_id, entity)
    return policy.authorize(caller, entity, action, target), target


def validate(schema, state):
    try:
        return schema.load(state)
    except ValidationError as err:
        raise ValidationFailed(err.messages, data=state)


def require_reference(model, ref_id, field, label):
    if ref_id is None or db.session.get(model, ref_id) is None:
        raise ValidationFailed({field: [f"{label} {ref_id} does not exist."]})


def apply_changes(obj, values):
    for key, value in values.items():
        setattr(obj, key, value)
    return obj


def save_new(obj):
    db.session.add(obj)
    db.session.commit()
    return obj


def save_changes(obj, entity):
    """Commit pending changes to ``obj``, resolving version conflicts.

    A row that vanished since it was loaded is reported as not found; any
    other conflict is fatal for the request.
    """
    model, pk = type(obj), obj.id
    try:
        db.session.commit()
    except StaleDataError as exc:
        db.session.rollback()
        if db.session.query(model.id).filter(model.id == pk).first() is None:
            raise EntityNotFound(entity, pk) from exc
        current_app.logger.error("Concurrent update on %s %s", entity, pk)
        raise ConcurrencyConflict(f"{entity} {pk} was changed by another request") from exc
    return obj
