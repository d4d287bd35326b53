from datetime import datetime

from golfteam import policy
from golfteam.extensions import db
from golfteam.models import EventScore

from conftest import auth, make_user


def test_admin_and_coach_list_every_score(client, team):
    for user in ("admin", "coach_user"):
        rv = client.get("/scores/", headers=auth(team[user]))
        assert rv.status_code == 200
        assert len(rv.get_json()["scores"]) == 2


def test_partner_lists_only_scores_of_own_athletes(client, team):
    rv = client.get("/scores/", headers=auth(team["partner_user"]))
    assert rv.status_code == 200
    scores = rv.get_json()["scores"]
    assert [score["id"] for score in scores] == [team["score"].id]
    assert all(score["athlete"]["partner_id"] == team["partner"].id for score in scores)


def test_partner_listing_follows_athlete_not_entering_partner(client, team):
    # Scored by the other partner, but for this partner's athlete
    extra = EventScore(athlete_id=team["athlete"].id, event_id=team["other_event"].id,
                       entered_by_partner_id=team["other_partner"].id, golf_score=75, holes_completed=9)
    db.session.add(extra)
    db.session.commit()

    rv = client.get("/scores/", headers=auth(team["partner_user"]))
    assert sorted(score["id"] for score in rv.get_json()["scores"]) == sorted([team["score"].id, extra.id])


def test_anonymous_and_athlete_cannot_list_scores(client, team):
    assert client.get("/scores/").status_code == 403
    assert client.get("/scores/", headers=auth(team["athlete_user"])).status_code == 403


def test_partner_role_without_profile_is_sent_to_registration(client, team):
    drifter = make_user("drifter@example.com", "Partner")
    rv = client.get("/scores/", headers=auth(drifter))
    assert rv.status_code == 302
    assert rv.headers["Location"].endswith("/partners/create")


def test_partner_score_is_entered_as_the_partner(client, team, monkeypatch):
    now = datetime(2025, 6, 5, 16, 45)
    monkeypatch.setattr(policy, "utcnow", lambda: now)

    rv = client.post(
        "/scores/create",
        json={
            "athlete_id": team["athlete"].id,
            "event_id": team["event"].id,
            "entered_by_partner_id": team["other_partner"].id,
            "golf_score": 68,
            "holes_completed": 18,
            "timestamp": "2020-01-01T00:00:00",
        },
        headers=auth(team["partner_user"]),
    )

    assert rv.status_code == 302
    score = EventScore.query.filter_by(golf_score=68).one()
    assert score.entered_by_partner_id == team["partner"].id
    assert score.timestamp == now


def test_partner_cannot_score_another_partners_athlete(client, team):
    rv = client.post(
        "/scores/create",
        json={"athlete_id": team["other_athlete"].id, "event_id": team["event"].id, "golf_score": 70,
              "holes_completed": 18},
        headers=auth(team["partner_user"]),
    )
    assert rv.status_code == 403
    assert EventScore.query.count() == 2


def test_coach_scores_any_athlete_for_any_partner(client, team):
    rv = client.post(
        "/scores/create",
        json={"athlete_id": team["other_athlete"].id, "event_id": team["other_event"].id,
              "entered_by_partner_id": team["partner"].id, "golf_score": 77, "holes_completed": 12},
        headers=auth(team["coach_user"]),
    )
    assert rv.status_code == 302
    score = EventScore.query.filter_by(golf_score=77).one()
    assert score.entered_by_partner_id == team["partner"].id


def test_holes_out_of_range_are_rejected(client, team):
    rv = client.post(
        "/scores/create",
        json={"athlete_id": team["athlete"].id, "event_id": team["event"].id,
              "entered_by_partner_id": team["partner"].id, "golf_score": 70, "holes_completed": 19},
        headers=auth(team["admin"]),
    )
    assert rv.status_code == 400
    assert "holes_completed" in rv.get_json()["errors"]


def test_unknown_event_reference_is_rejected(client, team):
    rv = client.post(
        "/scores/create",
        json={"athlete_id": team["athlete"].id, "event_id": 999,
              "entered_by_partner_id": team["partner"].id, "golf_score": 70, "holes_completed": 18},
        headers=auth(team["coach_user"]),
    )
    assert rv.status_code == 400
    assert "event_id" in rv.get_json()["errors"]


def test_edit_preserves_timestamp_for_every_role(client, team):
    score_id = team["score"].id
    original = team["score"].timestamp

    for user, golf_score in (("admin", 71), ("coach_user", 70), ("partner_user", 69)):
        rv = client.post(
            f"/scores/{score_id}/edit",
            json={"golf_score": golf_score, "timestamp": "2030-01-01T00:00:00"},
            headers=auth(team[user]),
        )
        assert rv.status_code == 302
        score = db.session.get(EventScore, score_id)
        assert score.golf_score == golf_score
        assert score.timestamp == original


def test_partner_edit_limited_to_result_fields(client, team):
    score_id = team["score"].id
    rv = client.post(
        f"/scores/{score_id}/edit",
        json={"athlete_id": team["other_athlete"].id, "entered_by_partner_id": team["other_partner"].id,
              "event_id": team["other_event"].id, "holes_completed": 9},
        headers=auth(team["partner_user"]),
    )
    assert rv.status_code == 302
    score = db.session.get(EventScore, score_id)
    assert score.athlete_id == team["athlete"].id
    assert score.entered_by_partner_id == team["partner"].id
    assert score.event_id == team["other_event"].id
    assert score.holes_completed == 9


def test_partner_cannot_edit_scores_entered_by_others(client, team):
    score_id = team["other_score"].id
    rv = client.post(f"/scores/{score_id}/edit", json={"golf_score": 60}, headers=auth(team["partner_user"]))
    assert rv.status_code == 403
    assert db.session.get(EventScore, score_id).golf_score == 80


def test_partner_cannot_delete_scores(client, team):
    rv = client.post(f"/scores/{team['score'].id}/delete", headers=auth(team["partner_user"]))
    assert rv.status_code == 403


def test_coach_deletes_score(client, team):
    score_id = team["score"].id
    assert client.post(f"/scores/{score_id}/delete", headers=auth(team["coach_user"])).status_code == 302
    assert db.session.get(EventScore, score_id) is None


def test_partner_create_form_offers_only_own_athletes(client, team):
    rv = client.get("/scores/create", headers=auth(team["partner_user"]))
    assert rv.status_code == 200
    body = rv.get_json()
    assert [athlete["name"] for athlete in body["athletes"]] == ["Alex Athlete"]
    assert [partner["id"] for partner in body["partners"]] == [team["partner"].id]
    assert len(body["events"]) == 2


def test_fractional_score_values_are_rejected(client, team):
    rv = client.post(
        "/scores/create",
        json={"athlete_id": team["athlete"].id, "event_id": team["event"].id,
              "entered_by_partner_id": team["partner"].id, "golf_score": 71.8, "holes_completed": 18.7},
        headers=auth(team["coach_user"]),
    )
    assert rv.status_code == 400
    errors = rv.get_json()["errors"]
    assert "holes_completed" in errors and "golf_score" in errors
    assert EventScore.query.count() == 2


def test_fractional_holes_on_edit_leave_score_unchanged(client, team):
    score_id = team["score"].id
    rv = client.post(f"/scores/{score_id}/edit", json={"holes_completed": 18.7}, headers=auth(team["partner_user"]))
    assert rv.status_code == 400
    assert db.session.get(EventScore, score_id).holes_completed == 18


def test_server_clock_is_naive_utc():
    assert policy.utcnow().tzinfo is None
