from golfteam import identity
from golfteam.extensions import db
from golfteam.models import Athlete, EventScore

from conftest import auth, make_user


def test_partner_lists_every_athlete(client, team):
    rv = client.get("/athletes/", headers=auth(team["partner_user"]))
    assert rv.status_code == 200
    names = [athlete["name"] for athlete in rv.get_json()["athletes"]]
    assert names == ["Alex Athlete", "Blake Athlete"]


def test_anonymous_cannot_list_athletes(client, team):
    assert client.get("/athletes/").status_code == 403


def test_athlete_role_cannot_list_athletes(client, team):
    assert client.get("/athletes/", headers=auth(team["athlete_user"])).status_code == 403


def test_partner_sees_other_partners_athlete_details(client, team):
    # Details are not narrowed by partner while score listings are.
    rv = client.get(f"/athletes/{team['other_athlete'].id}", headers=auth(team["partner_user"]))
    assert rv.status_code == 200
    body = rv.get_json()
    assert body["name"] == "Blake Athlete"
    assert [score["golf_score"] for score in body["event_scores"]] == [80]


def test_partner_edit_only_changes_ratings_and_picture(client, team):
    athlete = team["athlete"]
    athlete.name = "Old"
    db.session.commit()
    athlete_id, partner_id, user_id = athlete.id, athlete.partner_id, athlete.user_id

    rv = client.post(
        f"/athletes/{athlete_id}/edit",
        json={
            "name": "Hacked",
            "partner_id": team["other_partner"].id,
            "user_id": team["admin"].id,
            "swing_rating": 5,
            "picture_url": "https://example.com/alex.png",
        },
        headers=auth(team["partner_user"]),
    )

    assert rv.status_code == 302
    assert rv.headers["Location"].endswith("/athletes/")
    stored = db.session.get(Athlete, athlete_id)
    assert stored.name == "Old"
    assert stored.partner_id == partner_id
    assert stored.user_id == user_id
    assert stored.swing_rating == 5
    assert stored.picture_url == "https://example.com/alex.png"


def test_partner_cannot_edit_another_partners_athlete(client, team):
    other = team["other_athlete"]
    rv = client.post(f"/athletes/{other.id}/edit", json={"swing_rating": 5}, headers=auth(team["partner_user"]))
    assert rv.status_code == 403
    assert db.session.get(Athlete, other.id).swing_rating == 0


def test_partner_edit_form_is_reduced(client, team):
    rv = client.get(f"/athletes/{team['athlete'].id}/edit", headers=auth(team["partner_user"]))
    assert rv.status_code == 200
    body = rv.get_json()
    assert body["partner_edit_mode"] is True
    assert "partners" not in body
    assert "name" not in body["editable_fields"]


def test_rating_out_of_range_is_rejected(client, team):
    athlete_id = team["athlete"].id
    rv = client.post(f"/athletes/{athlete_id}/edit", json={"power_rating": 6}, headers=auth(team["coach_user"]))
    assert rv.status_code == 400
    body = rv.get_json()
    assert "power_rating" in body["errors"]
    assert body["data"]["power_rating"] == 6
    assert db.session.get(Athlete, athlete_id).power_rating == 0


def test_coach_moves_athlete_to_another_partner(client, team):
    athlete_id, new_partner = team["athlete"].id, team["other_partner"].id
    rv = client.post(f"/athletes/{athlete_id}/edit", json={"partner_id": new_partner}, headers=auth(team["coach_user"]))
    assert rv.status_code == 302
    assert db.session.get(Athlete, athlete_id).partner_id == new_partner


def test_create_requires_existing_partner(client, team):
    rv = client.post("/athletes/create", json={"name": "Nobody", "partner_id": 999}, headers=auth(team["coach_user"]))
    assert rv.status_code == 400
    assert "partner_id" in rv.get_json()["errors"]
    assert Athlete.query.filter_by(name="Nobody").count() == 0


def test_partner_cannot_create_athletes(client, team):
    rv = client.post(
        "/athletes/create", json={"name": "Sneaky", "partner_id": team["partner"].id}, headers=auth(team["partner_user"])
    )
    assert rv.status_code == 403


def test_coach_creates_athlete_linked_to_login(client, team):
    newcomer = make_user("newcomer@example.com")
    rv = client.post(
        "/athletes/create",
        json={"name": "Nova", "partner_id": team["partner"].id, "user_id": newcomer.id, "swing_rating": 3},
        headers=auth(team["coach_user"]),
    )

    assert rv.status_code == 302
    athlete = Athlete.query.filter_by(name="Nova").one()
    assert athlete.user_id == newcomer.id
    assert athlete.swing_rating == 3
    assert identity.roles_of(newcomer.id) == {"Athlete"}


def test_delete_athlete_cascades_scores(client, team):
    athlete_id = team["athlete"].id
    rv = client.post(f"/athletes/{athlete_id}/delete", headers=auth(team["admin"]))
    assert rv.status_code == 302
    assert db.session.get(Athlete, athlete_id) is None
    assert EventScore.query.filter_by(athlete_id=athlete_id).count() == 0
    assert EventScore.query.count() == 1


def test_missing_athlete_is_not_found(client, team):
    headers = auth(team["admin"])
    assert client.get("/athletes/999", headers=headers).status_code == 404
    assert client.get("/athletes/999/edit", headers=headers).status_code == 404
    assert client.post("/athletes/999/edit", json={"name": "X"}, headers=headers).status_code == 404
    assert client.get("/athletes/999/delete", headers=headers).status_code == 404
    assert client.post("/athletes/999/delete", headers=headers).status_code == 404


def test_body_id_mismatch_is_not_found(client, team):
    athlete_id = team["athlete"].id
    rv = client.post(
        f"/athletes/{athlete_id}/edit", json={"id": athlete_id + 1, "name": "Other"}, headers=auth(team["admin"])
    )
    assert rv.status_code == 404
    assert db.session.get(Athlete, athlete_id).name == "Alex Athlete"


def test_fractional_rating_is_rejected(client, team):
    athlete_id = team["athlete"].id
    rv = client.post(f"/athletes/{athlete_id}/edit", json={"swing_rating": 4.9}, headers=auth(team["partner_user"]))
    assert rv.status_code == 400
    assert "swing_rating" in rv.get_json()["errors"]
    assert db.session.get(Athlete, athlete_id).swing_rating == 0


def test_whole_number_rating_from_form_is_accepted(client, team):
    athlete_id = team["athlete"].id
    rv = client.post(f"/athletes/{athlete_id}/edit", data={"swing_rating": "4"}, headers=auth(team["partner_user"]))
    assert rv.status_code == 302
    assert db.session.get(Athlete, athlete_id).swing_rating == 4


def test_non_object_body_is_rejected(client, team):
    athlete_id = team["athlete"].id
    rv = client.post(f"/athletes/{athlete_id}/edit", json=[1, 2], headers=auth(team["admin"]))
    assert rv.status_code == 400
    assert "_schema" in rv.get_json()["errors"]
    assert db.session.get(Athlete, athlete_id).name == "Alex Athlete"


def test_role_gate_runs_before_body_id_check(client, team):
    athlete_id = team["athlete"].id
    body = {"id": athlete_id + 1, "name": "Other"}
    assert client.post(f"/athletes/{athlete_id}/edit", json=body).status_code == 403
    assert client.post(
        f"/athletes/{athlete_id}/edit", json=body, headers=auth(team["athlete_user"])
    ).status_code == 403
