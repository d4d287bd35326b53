from datetime import date

from sqlalchemy import desc, exists

from golfteam import policy
from golfteam.extensions import db
from golfteam.filters import format_date
from golfteam.models import Athlete, Coach, EventScore, GolfEvent, Partner, User
from golfteam.models.user import ADMIN, COACH, PARTNER, ATHLETE

RECENT_EVENTS_LIMIT = 5

# Where the dashboard index sends each primary role
DASHBOARD_ENDPOINTS = {
    ADMIN: "dashboard.admin_dashboard",
    COACH: "dashboard.coach_dashboard",
    PARTNER: "dashboard.partner_dashboard",
    ATHLETE: "dashboard.athlete_dashboard",
}


def destination(caller):
    """Endpoint of the caller's dashboard, or None when they hold no role yet."""
    return DASHBOARD_ENDPOINTS.get(caller.primary_role)


def recent_events(limit=RECENT_EVENTS_LIMIT):
    return GolfEvent.query.order_by(desc(GolfEvent.event_date)).limit(limit).all()


def next_event(today=None):
    today = today or date.today()
    return (
        GolfEvent.query
        .filter(GolfEvent.event_date > today)
        .order_by(GolfEvent.event_date, GolfEvent.start_time)
        .first()
    )


def latest_score():
    return EventScore.query.order_by(desc(EventScore.timestamp)).first()


def team_totals():
    return {
        "total_athletes": Athlete.query.count(),
        "total_events": GolfEvent.query.count(),
        "total_scores": EventScore.query.count(),
        "total_partners": Partner.query.count(),
    }


def coach_dashboard(caller, today=None):
    policy.authorize(caller, "coach_dashboard", policy.VIEW)
    coach = db.session.get(Coach, caller.coach_id)

    latest = latest_score()
    upcoming = next_event(today)
    stats = team_totals()
    stats["athletes_with_partners"] = Athlete.query.filter(Athlete.partner_id > 0).count()

    return {
        "coach_name": coach.name,
        "stats": stats,
        "latest_score_date": format_date(latest.timestamp if latest else None, "No scores yet"),
        "next_event_date": format_date(upcoming.event_date if upcoming else None, "No upcoming events"),
        "recent_events": recent_events(),
    }


def partner_dashboard(caller):
    policy.authorize(caller, "partner_dashboard", policy.VIEW)
    partner = db.session.get(Partner, caller.partner_id)

    athlete = (
        Athlete.query
        .filter_by(partner_id=partner.id)
        .order_by(Athlete.id)
        .first()
    )
    return {"partner_name": partner.name, "athlete": athlete}


def athlete_dashboard(caller):
    policy.authorize(caller, "athlete_dashboard", policy.VIEW)
    return {"athlete": db.session.get(Athlete, caller.athlete_id)}


def users_without_profiles():
    """Registered identities with no Coach, Partner or Athlete profile."""
    return (
        User.query
        .filter(~exists().where(Coach.user_id == User.id))
        .filter(~exists().where(Partner.user_id == User.id))
        .filter(~exists().where(Athlete.user_id == User.id))
        .count()
    )


def admin_dashboard(caller):
    policy.authorize(caller, "admin_dashboard", policy.VIEW)

    stats = team_totals()
    stats["total_coaches"] = Coach.query.count()
    stats["total_registered_users"] = User.query.count()
    stats["users_without_profiles"] = users_without_profiles()
    return {"stats": stats, "recent_events": recent_events()}


def admin_data(caller):
    """Every athlete with partner and scores, plus the full event calendar."""
    policy.authorize(caller, "admin_data", policy.VIEW)
    return {
        "athletes": Athlete.query.order_by(Athlete.name).all(),
        "events": GolfEvent.query.order_by(GolfEvent.event_date).all(),
    }
