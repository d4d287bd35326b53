from .athlete import AthleteSchema
from .profile import PartnerSchema, CoachSchema
from .golf_event import GolfEventSchema
from .event_score import EventScoreSchema
from .user import UserSchema

__all__ = [
    "AthleteSchema", "PartnerSchema", "CoachSchema",
    "GolfEventSchema", "EventScoreSchema", "UserSchema",
]
