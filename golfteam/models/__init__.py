from .user import User, UserRole
from .partner import Partner
from .coach import Coach
from .athlete import Athlete
from .golf_event import GolfEvent
from .event_score import EventScore

__all__ = [
    "User", "UserRole",
    "Partner", "Coach", "Athlete",
    "GolfEvent", "EventScore",
]
