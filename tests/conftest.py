from datetime import date, datetime, time

import pytest

from golfteam import create_app, identity
from golfteam.config import TestingConfig
from golfteam.extensions import db
from golfteam.models import Athlete, Coach, EventScore, GolfEvent, Partner, User, UserRole
from golfteam.policy import Caller

PASSWORD = "Secret123!"


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def make_user(email, *roles):
    user = User(email=email)
    user.set_password(PASSWORD)
    db.session.add(user)
    db.session.commit()
    for role in roles:
        db.session.add(UserRole(user_id=user.id, role=role))
    db.session.commit()
    return user


def make_partner(name="Pat Partner", user=None):
    partner = Partner(name=name, email=f"{name.split()[0].lower()}@example.com", phone="555-0100",
                      user_id=user.id if user else None)
    db.session.add(partner)
    db.session.commit()
    return partner


def make_coach(name="Casey Coach", user=None):
    coach = Coach(name=name, email=f"{name.split()[0].lower()}@example.com", phone="555-0200",
                  user_id=user.id if user else None)
    db.session.add(coach)
    db.session.commit()
    return coach


def make_athlete(partner, name="Alex Athlete", user=None, **ratings):
    athlete = Athlete(name=name, partner_id=partner.id, user_id=user.id if user else None, **ratings)
    db.session.add(athlete)
    db.session.commit()
    return athlete


def make_event(coach, title="Spring Open", event_date=date(2025, 6, 2),
               start_time=time(9, 0), end_time=time(13, 0)):
    event = GolfEvent(title=title, event_date=event_date, start_time=start_time, end_time=end_time,
                      location="Pine Valley", created_by_coach_id=coach.id)
    db.session.add(event)
    db.session.commit()
    return event


def make_score(athlete, event, partner, golf_score=72, holes_completed=18,
               timestamp=datetime(2025, 6, 2, 14, 30)):
    score = EventScore(athlete_id=athlete.id, event_id=event.id, entered_by_partner_id=partner.id,
                       golf_score=golf_score, holes_completed=holes_completed, timestamp=timestamp)
    db.session.add(score)
    db.session.commit()
    return score


def auth(user):
    """Bearer header carrying the user's current roles."""
    return {"Authorization": f"Bearer {identity.issue_token(user.id)}"}


def caller_for(user, coach=None, partner=None, athlete=None):
    return Caller(
        user_id=user.id,
        roles=frozenset(user.role_names),
        coach_id=coach.id if coach else None,
        partner_id=partner.id if partner else None,
        athlete_id=athlete.id if athlete else None,
    )


@pytest.fixture
def team(app):
    """Admin, two coaches, two partners with one athlete each, one event and scores."""
    admin = make_user("admin@example.com", "Admin")
    coach_user = make_user("coach@example.com", "Coach")
    other_coach_user = make_user("coach2@example.com", "Coach")
    partner_user = make_user("partner@example.com", "Partner")
    other_partner_user = make_user("partner2@example.com", "Partner")
    athlete_user = make_user("athlete@example.com", "Athlete")

    coach = make_coach("Casey Coach", coach_user)
    other_coach = make_coach("Corey Coach", other_coach_user)
    partner = make_partner("Pat Partner", partner_user)
    other_partner = make_partner("Quinn Partner", other_partner_user)
    athlete = make_athlete(partner, "Alex Athlete", athlete_user)
    other_athlete = make_athlete(other_partner, "Blake Athlete")
    event = make_event(coach)
    other_event = make_event(other_coach, title="Club Championship", event_date=date(2025, 7, 10))
    score = make_score(athlete, event, partner)
    other_score = make_score(other_athlete, event, other_partner, golf_score=80,
                             timestamp=datetime(2025, 6, 3, 10, 0))

    return {
        "admin": admin,
        "coach_user": coach_user,
        "other_coach_user": other_coach_user,
        "partner_user": partner_user,
        "other_partner_user": other_partner_user,
        "athlete_user": athlete_user,
        "coach": coach,
        "other_coach": other_coach,
        "partner": partner,
        "other_partner": other_partner,
        "athlete": athlete,
        "other_athlete": other_athlete,
        "event": event,
        "other_event": other_event,
        "score": score,
        "other_score": other_score,
    }
