"""Role-scoped authorization policy.

``POLICY`` maps ``(entity, action)`` to the rule each role receives. A rule
states which submitted fields the role may set, the ownership predicate the
target row must satisfy, whether the role needs a linked profile, values the
server forces over the submission and, for lists, the row scope.

Everything here is pure: it reads the caller context and the rows handed in,
and never touches the session.
"""
from dataclasses import dataclass
from typing import Callable, FrozenSet, Optional

from golfteam.errors import AccessDenied, ProfileMissing
from golfteam.models.athlete import Athlete
from golfteam.models.user import ADMIN, COACH, PARTNER, ATHLETE, ROLE_NAMES
from golfteam.utils.clock import utcnow

# Pseudo-role held by every caller with an identity, checked after real roles.
AUTHENTICATED = "Authenticated"

LIST = "list"
DETAILS = "details"
CREATE = "create"
EDIT = "edit"
DELETE = "delete"
VIEW = "view"

LINK_FIELD = "user_id"

ATHLETE_RATING_FIELDS = frozenset({"picture_url", "swing_rating", "power_rating", "understanding_rating"})
ATHLETE_FIELDS = ATHLETE_RATING_FIELDS | {"name", "partner_id"}
CONTACT_FIELDS = frozenset({"name", "email", "phone"})
EVENT_FIELDS = frozenset({"title", "event_date", "start_time", "end_time", "location", "created_by_coach_id"})
SCORE_FIELDS = frozenset({"athlete_id", "event_id", "entered_by_partner_id", "golf_score", "holes_completed"})
SCORE_RESULT_FIELDS = frozenset({"event_id", "golf_score", "holes_completed"})


@dataclass(frozen=True)
class Caller:
    """Who is asking: identity, role set and the ids of linked profiles."""

    user_id: Optional[int] = None
    roles: FrozenSet[str] = frozenset()
    coach_id: Optional[int] = None
    partner_id: Optional[int] = None
    athlete_id: Optional[int] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def has_role(self, role: str) -> bool:
        return role in self.roles

    @property
    def primary_role(self) -> Optional[str]:
        return next((role for role in ROLE_NAMES if role in self.roles), None)

    def qualifying_roles(self):
        ordered = [role for role in ROLE_NAMES if role in self.roles]
        if self.is_authenticated:
            ordered.append(AUTHENTICATED)
        return ordered

    def profile_id(self, profile: str) -> Optional[int]:
        return getattr(self, f"{profile}_id")


ANONYMOUS = Caller()


def _anyone(caller, target):
    return True


@dataclass(frozen=True)
class Rule:
    role: str
    fields: FrozenSet[str] = frozenset()
    owns: Callable = _anyone
    # Linked profile the role must have ("coach", "partner", "athlete")
    profile: Optional[str] = None
    # Schema fields overwritten from the caller before validation
    forced: Optional[Callable] = None
    # Server-managed values applied after validation
    stamps: Optional[Callable] = None
    # SQL criterion narrowing list results
    scope: Optional[Callable] = None
    # Self-service creation: bind the new profile to the caller and grant the role
    binds_identity: bool = False


def _each(*roles, **kwargs):
    return {role: Rule(role, **kwargs) for role in roles}


# -- ownership predicates ---------------------------------------------------

def _partners_athlete(caller, athlete):
    return caller.partner_id is not None and athlete.partner_id == caller.partner_id


def _score_for_partners_athlete(caller, score):
    athlete = score.athlete
    return caller.partner_id is not None and athlete is not None and athlete.partner_id == caller.partner_id


def _entered_by_caller(caller, score):
    return caller.partner_id is not None and score.entered_by_partner_id == caller.partner_id


def _own_profile(caller, profile):
    return caller.user_id is not None and profile.user_id == caller.user_id


def _created_by_caller(caller, event):
    return caller.coach_id is not None and event.created_by_coach_id == caller.coach_id


# -- forced values and scopes -----------------------------------------------

def _bind_caller(caller):
    return {LINK_FIELD: caller.user_id}


def _enter_as_caller(caller):
    return {"entered_by_partner_id": caller.partner_id}


def _stamp(caller):
    return {"timestamp": utcnow()}


def _partners_athletes_scope(caller):
    return Athlete.partner_id == caller.partner_id


POLICY = {
    # Any partner may view any athlete; only score listings are narrowed.
    ("athlete", LIST): _each(ADMIN, COACH, PARTNER),
    ("athlete", DETAILS): _each(ADMIN, COACH, PARTNER),
    ("athlete", CREATE): _each(ADMIN, COACH, fields=ATHLETE_FIELDS | {LINK_FIELD}),
    ("athlete", EDIT): {
        **_each(ADMIN, COACH, fields=ATHLETE_FIELDS),
        PARTNER: Rule(PARTNER, fields=ATHLETE_RATING_FIELDS, owns=_partners_athlete),
    },
    ("athlete", DELETE): _each(ADMIN, COACH),

    ("coach", LIST): _each(ADMIN, COACH, PARTNER),
    ("coach", DETAILS): _each(ADMIN, COACH, PARTNER),
    ("coach", CREATE): {
        ADMIN: Rule(ADMIN, fields=CONTACT_FIELDS),
        AUTHENTICATED: Rule(AUTHENTICATED, fields=CONTACT_FIELDS, forced=_bind_caller, binds_identity=True),
    },
    ("coach", EDIT): {
        ADMIN: Rule(ADMIN, fields=CONTACT_FIELDS | {LINK_FIELD}),
        COACH: Rule(COACH, fields=CONTACT_FIELDS, owns=_own_profile),
    },
    ("coach", DELETE): _each(ADMIN),

    ("partner", LIST): _each(ADMIN, COACH, PARTNER),
    ("partner", DETAILS): _each(ADMIN, COACH, PARTNER),
    ("partner", CREATE): {
        **_each(ADMIN, COACH, fields=CONTACT_FIELDS),
        AUTHENTICATED: Rule(AUTHENTICATED, fields=CONTACT_FIELDS, forced=_bind_caller, binds_identity=True),
    },
    ("partner", EDIT): {
        ADMIN: Rule(ADMIN, fields=CONTACT_FIELDS | {LINK_FIELD}),
        COACH: Rule(COACH, fields=CONTACT_FIELDS),
        PARTNER: Rule(PARTNER, fields=CONTACT_FIELDS, owns=_own_profile),
    },
    ("partner", DELETE): _each(ADMIN),

    ("golf_event", LIST): _each(ADMIN, COACH, PARTNER, ATHLETE),
    ("golf_event", DETAILS): _each(ADMIN, COACH, PARTNER, ATHLETE),
    ("golf_event", CREATE): _each(ADMIN, COACH, fields=EVENT_FIELDS),
    ("golf_event", EDIT): {
        ADMIN: Rule(ADMIN, fields=EVENT_FIELDS),
        COACH: Rule(COACH, fields=EVENT_FIELDS - {"created_by_coach_id"}, owns=_created_by_caller),
    },
    ("golf_event", DELETE): {
        ADMIN: Rule(ADMIN),
        COACH: Rule(COACH, owns=_created_by_caller),
    },

    ("event_score", LIST): {
        **_each(ADMIN, COACH),
        PARTNER: Rule(PARTNER, profile="partner", scope=_partners_athletes_scope),
    },
    ("event_score", DETAILS): {
        **_each(ADMIN, COACH),
        PARTNER: Rule(PARTNER, owns=_score_for_partners_athlete),
    },
    ("event_score", CREATE): {
        **_each(ADMIN, COACH, fields=SCORE_FIELDS, stamps=_stamp),
        PARTNER: Rule(
            PARTNER,
            fields=SCORE_FIELDS,
            owns=_score_for_partners_athlete,
            profile="partner",
            forced=_enter_as_caller,
            stamps=_stamp,
            scope=_partners_athletes_scope,
        ),
    },
    ("event_score", EDIT): {
        **_each(ADMIN, COACH, fields=SCORE_FIELDS),
        PARTNER: Rule(PARTNER, fields=SCORE_RESULT_FIELDS, owns=_entered_by_caller),
    },
    ("event_score", DELETE): _each(ADMIN, COACH),

    ("coach_dashboard", VIEW): {COACH: Rule(COACH, profile="coach")},
    ("partner_dashboard", VIEW): {PARTNER: Rule(PARTNER, profile="partner")},
    ("athlete_dashboard", VIEW): {ATHLETE: Rule(ATHLETE, profile="athlete")},
    ("admin_dashboard", VIEW): _each(ADMIN),
    ("admin_data", VIEW): _each(ADMIN),
}


def authorize(caller: Caller, entity: str, action: str, target=None) -> Rule:
    """Return the rule granting ``caller`` the action, or raise.

    Roles are tried from the highest privilege down and the first one whose
    rule accepts the target wins. Without a target only the role and profile
    requirements are checked.
    """
    rules = POLICY.get((entity, action), {})
    missing_profile = None
    refused = False

    for role in caller.qualifying_roles():
        rule = rules.get(role)
        if rule is None:
            continue
        if rule.profile and caller.profile_id(rule.profile) is None:
            missing_profile = missing_profile or rule.profile
            continue
        if target is None or rule.owns(caller, target):
            return rule
        refused = True

    if missing_profile and not refused:
        raise ProfileMissing(missing_profile)
    raise AccessDenied(f"Unauthorized: cannot {action} {entity.replace('_', ' ')}")


def effective_changes(rule: Rule, submitted) -> dict:
    """Submitted values the rule lets through.

    An empty identity link never clears the stored one.
    """
    changes = {key: value for key, value in submitted.items() if key in rule.fields}
    if changes.get(LINK_FIELD) in (None, ""):
        changes.pop(LINK_FIELD, None)
    return changes


def merge_submission(rule: Rule, caller: Caller, submitted, stored=None) -> dict:
    """State to validate: stored values, then permitted input, then forced values."""
    state = dict(stored or {})
    state.update(effective_changes(rule, submitted))
    if rule.forced:
        state.update(rule.forced(caller))
    return state


def server_values(rule: Rule, caller: Caller) -> dict:
    return rule.stamps(caller) if rule.stamps else {}
