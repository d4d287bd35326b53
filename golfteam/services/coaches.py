from golfteam.models import Coach, GolfEvent
from golfteam.models.user import COACH
from golfteam.schemas import CoachSchema
from . import profiles


def _dependents(coach):
    return [("golf events", GolfEvent.query.filter_by(created_by_coach_id=coach.id).count())]


COACHES = profiles.ProfileKind("coach", Coach, CoachSchema(), COACH, _dependents)


def list_coaches(caller):
    return profiles.list_profiles(COACHES, caller)


def get_coach(caller, coach_id):
    return profiles.get_profile(COACHES, caller, coach_id)


def create_form(caller):
    return profiles.create_form(COACHES, caller)


def create_coach(caller, submitted):
    return profiles.create_profile(COACHES, caller, submitted)


def edit_form(caller, coach_id):
    return profiles.edit_form(COACHES, caller, coach_id)


def update_coach(caller, coach_id, submitted):
    return profiles.update_profile(COACHES, caller, coach_id, submitted)


def delete_form(caller, coach_id):
    return profiles.delete_form(COACHES, caller, coach_id)


def delete_coach(caller, coach_id):
    return profiles.delete_profile(COACHES, caller, coach_id)
