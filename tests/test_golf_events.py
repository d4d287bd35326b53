from golfteam.extensions import db
from golfteam.models import EventScore, GolfEvent

from conftest import auth


def event_payload(coach_id, **overrides):
    payload = {
        "title": "Summer Classic",
        "event_date": "2025-08-15",
        "start_time": "08:00",
        "end_time": "12:30",
        "location": "Lakeside",
        "created_by_coach_id": coach_id,
    }
    payload.update(overrides)
    return payload


def test_every_role_lists_events(client, team):
    for user in ("admin", "coach_user", "partner_user", "athlete_user"):
        rv = client.get("/events/", headers=auth(team[user]))
        assert rv.status_code == 200
        assert len(rv.get_json()["events"]) == 2


def test_anonymous_cannot_list_events(client, team):
    assert client.get("/events/").status_code == 403


def test_coach_creates_event(client, team):
    rv = client.post("/events/create", json=event_payload(team["coach"].id), headers=auth(team["coach_user"]))
    assert rv.status_code == 302
    event = GolfEvent.query.filter_by(title="Summer Classic").one()
    assert event.created_by_coach_id == team["coach"].id
    assert event.end_time.hour == 12


def test_inverted_times_are_rejected_on_end_time(client, team):
    rv = client.post(
        "/events/create",
        json=event_payload(team["coach"].id, start_time="14:00", end_time="13:00"),
        headers=auth(team["coach_user"]),
    )
    assert rv.status_code == 400
    assert rv.get_json()["errors"]["end_time"] == ["End time must be after start time."]
    assert GolfEvent.query.filter_by(title="Summer Classic").count() == 0


def test_equal_times_are_rejected(client, team):
    rv = client.post(
        "/events/create",
        json=event_payload(team["coach"].id, start_time="10:00", end_time="10:00"),
        headers=auth(team["admin"]),
    )
    assert rv.status_code == 400
    assert "end_time" in rv.get_json()["errors"]


def test_inverted_times_on_edit_leave_event_unchanged(client, team):
    event_id = team["event"].id
    rv = client.post(f"/events/{event_id}/edit", json={"end_time": "08:00"}, headers=auth(team["coach_user"]))
    assert rv.status_code == 400
    assert db.session.get(GolfEvent, event_id).end_time.hour == 13


def test_partner_cannot_create_events(client, team):
    rv = client.post("/events/create", json=event_payload(team["coach"].id), headers=auth(team["partner_user"]))
    assert rv.status_code == 403


def test_coach_edits_own_event_without_reassigning_creator(client, team):
    event_id, coach_id = team["event"].id, team["coach"].id
    rv = client.post(
        f"/events/{event_id}/edit",
        json={"title": "Spring Open (rescheduled)", "created_by_coach_id": team["other_coach"].id},
        headers=auth(team["coach_user"]),
    )
    assert rv.status_code == 302
    event = db.session.get(GolfEvent, event_id)
    assert event.title == "Spring Open (rescheduled)"
    assert event.created_by_coach_id == coach_id


def test_coach_cannot_touch_another_coaches_event(client, team):
    event_id = team["other_event"].id
    headers = auth(team["coach_user"])

    assert client.post(f"/events/{event_id}/edit", json={"title": "Mine now"}, headers=headers).status_code == 403
    assert client.post(f"/events/{event_id}/delete", headers=headers).status_code == 403
    event = db.session.get(GolfEvent, event_id)
    assert event is not None
    assert event.title == "Club Championship"


def test_admin_reassigns_event_creator(client, team):
    event_id, other_coach = team["event"].id, team["other_coach"].id
    rv = client.post(f"/events/{event_id}/edit", json={"created_by_coach_id": other_coach}, headers=auth(team["admin"]))
    assert rv.status_code == 302
    assert db.session.get(GolfEvent, event_id).created_by_coach_id == other_coach


def test_delete_event_cascades_scores(client, team):
    event_id = team["event"].id
    rv = client.post(f"/events/{event_id}/delete", headers=auth(team["coach_user"]))
    assert rv.status_code == 302
    assert db.session.get(GolfEvent, event_id) is None
    assert EventScore.query.count() == 0


def test_missing_event_is_not_found(client, team):
    headers = auth(team["admin"])
    assert client.get("/events/404/edit", headers=headers).status_code == 404
    assert client.post("/events/404/delete", headers=headers).status_code == 404
