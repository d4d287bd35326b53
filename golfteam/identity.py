"""Identity and role provider.

Identities are ``User`` rows; the roles a request acts with travel in the
``roles`` claim of its access token, so a newly granted role only takes effect
once the session credential is re-issued with ``refresh_session``.
"""
from flask import current_app
from flask_jwt_extended import (
    create_access_token,
    get_jwt,
    get_jwt_identity,
    set_access_cookies,
    verify_jwt_in_request,
)

from golfteam.extensions import db
from golfteam.models import Athlete, Coach, Partner, User, UserRole
from golfteam.models.user import ROLE_NAMES
from golfteam.policy import ANONYMOUS, Caller


def current_identity():
    verify_jwt_in_request(optional=True)
    identity = get_jwt_identity()
    return int(identity) if identity is not None else None


def roles_of(user_id):
    return {assignment.role for assignment in UserRole.query.filter_by(user_id=user_id).all()}


def assign_role(user_id, role):
    user = db.session.get(User, user_id)
    if user is None or role not in ROLE_NAMES:
        return False

    if role not in user.role_names:
        db.session.add(UserRole(user_id=user.id, role=role))
        db.session.commit()
        current_app.logger.info("Granted role %s to user %s", role, user_id)
    return True


def issue_token(user_id):
    return create_access_token(
        identity=str(user_id),
        additional_claims={"roles": sorted(roles_of(user_id))},
    )


def refresh_session(response, user_id):
    """Re-issue the caller's access cookie so it carries their current roles."""
    token = issue_token(user_id)
    set_access_cookies(response, token)
    return token


def link_profile(user_id, profile, role):
    """Grant ``role`` to the identity and bind ``profile`` to it."""
    if not assign_role(user_id, role):
        current_app.logger.warning("Could not assign role %s to user %s", role, user_id)
        return False

    profile.user_id = user_id
    db.session.commit()
    return True


def _linked_profile_id(model, user_id):
    row = db.session.query(model.id).filter(model.user_id == user_id).order_by(model.id).first()
    return row[0] if row else None


def load_caller():
    """Caller context for the current request; anonymous when no token is sent."""
    user_id = current_identity()
    if user_id is None:
        return ANONYMOUS

    return Caller(
        user_id=user_id,
        roles=frozenset(get_jwt().get("roles", ())),
        coach_id=_linked_profile_id(Coach, user_id),
        partner_id=_linked_profile_id(Partner, user_id),
        athlete_id=_linked_profile_id(Athlete, user_id),
    )
