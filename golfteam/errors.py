"""Error taxonomy shared by the policy, the services and the blueprints.

Each exception maps to one request outcome; the handlers registered in
``create_app`` turn them into responses. ``ConcurrencyConflict`` is the one
kind without a handler: it reaches Flask's generic failure handling.
"""


class GolfTeamError(Exception):
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationFailed(GolfTeamError):
    """Submitted data violates a field constraint; the caller may resubmit."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors, data=None, message=None):
        super().__init__(message)
        self.errors = errors
        self.data = data or {}


class EntityNotFound(GolfTeamError):
    status_code = 404
    default_message = "Not found"

    def __init__(self, entity, entity_id=None):
        super().__init__(f"{entity} {entity_id} not found" if entity_id is not None else f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class AccessDenied(GolfTeamError):
    status_code = 403
    default_message = "Unauthorized"


class ProfileMissing(GolfTeamError):
    """The caller's role needs a linked Coach/Partner/Athlete profile it does not have."""

    status_code = 302

    def __init__(self, profile):
        super().__init__(f"Please complete your {profile} profile first.")
        self.profile = profile


class DeleteRestricted(GolfTeamError):
    status_code = 409

    def __init__(self, entity, entity_id, dependents):
        super().__init__(f"{entity} {entity_id} is still referenced by {', '.join(dependents)}")
        self.dependents = dependents


class ConcurrencyConflict(GolfTeamError):
    status_code = 409
    default_message = "The record was changed by another request"
