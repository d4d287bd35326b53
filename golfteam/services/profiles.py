"""Coach and Partner profiles share one lifecycle.

Both can be created on behalf of someone else by privileged roles or through
self-registration, which binds the profile to the caller's identity and grants
the matching role.
"""
from collections import namedtuple

from flask import current_app

from golfteam import identity, policy
from golfteam.errors import DeleteRestricted
from golfteam.extensions import db
from golfteam.models import User
from .base import (
    apply_changes, authorize_target, require_reference,
    save_changes, save_new, validate,
)

# Registration outcomes
CREATED = "created"            # on behalf of someone else
REGISTERED = "registered"      # self-service, role granted
EXISTING = "existing"          # self-service, the caller already has one
ROLE_FAILED = "role_failed"    # self-service, profile saved but role not granted

ProfileKind = namedtuple("ProfileKind", ["entity", "model", "schema", "role", "dependents"])
Registration = namedtuple("Registration", ["profile", "outcome"])


def list_profiles(kind, caller):
    policy.authorize(caller, kind.entity, policy.LIST)
    return kind.model.query.order_by(kind.model.name).all()


def get_profile(kind, caller, profile_id):
    rule, profile = authorize_target(caller, kind.entity, policy.DETAILS, kind.model, profile_id)
    return profile


def _own_profile(kind, caller):
    return kind.model.query.filter_by(user_id=caller.user_id).order_by(kind.model.id).first()


def create_form(kind, caller):
    """Return ``(rule, existing)``; ``existing`` is set when a self-registering caller already has a profile."""
    rule = policy.authorize(caller, kind.entity, policy.CREATE)
    existing = _own_profile(kind, caller) if rule.binds_identity else None
    return rule, existing


def create_profile(kind, caller, submitted):
    rule, existing = create_form(kind, caller)
    if existing is not None:
        return Registration(existing, EXISTING)

    data = validate(kind.schema, policy.merge_submission(rule, caller, submitted))
    profile = save_new(kind.model(**data))

    if not rule.binds_identity:
        current_app.logger.info("%s %s created by user %s", kind.entity, profile.id, caller.user_id)
        return Registration(profile, CREATED)

    if identity.link_profile(caller.user_id, profile, kind.role):
        current_app.logger.info("User %s registered as %s %s", caller.user_id, kind.entity, profile.id)
        return Registration(profile, REGISTERED)
    return Registration(profile, ROLE_FAILED)


def edit_form(kind, caller, profile_id):
    return authorize_target(caller, kind.entity, policy.EDIT, kind.model, profile_id)


def update_profile(kind, caller, profile_id, submitted):
    """Returns ``(rule, profile)``; the winning rule decides where the caller goes next."""
    rule, profile = authorize_target(caller, kind.entity, policy.EDIT, kind.model, profile_id, submitted)

    state = policy.merge_submission(rule, caller, submitted, stored=kind.schema.dump(profile))
    data = validate(kind.schema, state)
    if data.get("user_id") is not None and data["user_id"] != profile.user_id:
        require_reference(User, data["user_id"], "user_id", "User")

    apply_changes(profile, data)
    save_changes(profile, kind.entity)
    current_app.logger.info("%s %s updated by user %s as %s", kind.entity, profile.id, caller.user_id, rule.role)
    return rule, profile


def delete_form(kind, caller, profile_id):
    rule, profile = authorize_target(caller, kind.entity, policy.DELETE, kind.model, profile_id)
    return profile


def delete_profile(kind, caller, profile_id):
    rule, profile = authorize_target(caller, kind.entity, policy.DELETE, kind.model, profile_id)

    blocking = [label for label, count in kind.dependents(profile) if count]
    if blocking:
        current_app.logger.warning("Refused to delete %s %s: referenced by %s", kind.entity, profile_id, blocking)
        raise DeleteRestricted(kind.entity, profile_id, blocking)

    db.session.delete(profile)
    save_changes(profile, kind.entity)
    current_app.logger.info("%s %s deleted by user %s", kind.entity, profile_id, caller.user_id)
