from datetime import datetime, timedelta, timezone

from models.enums import UserRole
from models.user import User


def _event_payload(**overrides):
    data = {
        "name": "Opening Ceremony",
        "desc": "Kickoff",
        "start_date": "2026-03-01",
        "end_date": "2026-03-02",
    }
    data.update(overrides)
    return data


def test_root(client):
    assert client.get("/").status_code == 200


def test_registration_form(client):
    res = client.get("/registration/form")
    assert res.status_code == 200
    groups = res.json()["groups"]
    assert groups[0]["name"] == "general"
    assert groups[0]["questions"][0]["name"] == "firstName"


class TestAuth:
    def test_me_requires_a_token(self, client):
        assert client.get("/users/me").status_code == 401
        assert client.get("/users/me", headers={"Authorization": "Bearer nope"}).status_code == 401

    def test_me(self, client, make_user):
        user, headers = make_user()
        res = client.get("/users/me", headers=headers)
        assert res.status_code == 200
        body = res.json()
        assert body["id"] == user.id
        assert body["role"] == "none"
        assert body["group"] == "none"

    def test_admin_routes_reject_plain_users(self, client, make_user):
        _, headers = make_user()
        assert client.get("/users/", headers=headers).status_code == 403
        assert client.post("/events/", json=_event_payload(), headers=headers).status_code == 403


class TestRegistrationSubmission:
    def test_submit_and_read_back(self, client, make_user, valid_answers):
        _, headers = make_user()
        res = client.put("/users/me/registration", json=valid_answers, headers=headers)
        assert res.status_code == 200
        assert res.json()["role"] == "registerant"

        stored = client.get("/users/me/registration", headers=headers)
        assert stored.json() == valid_answers

    def test_invalid_submission_lists_every_field(self, client, make_user, valid_answers):
        _, headers = make_user()
        del valid_answers["general"]["firstName"]
        valid_answers["experience"]["numPrevHackathons"] = 256
        res = client.put("/users/me/registration", json=valid_answers, headers=headers)

        assert res.status_code == 422
        names = {e["name"] for e in res.json()["errors"]}
        assert names == {"firstName", "numPrevHackathons"}

        assert client.get("/users/me/registration", headers=headers).json() is None

    def test_huge_number_is_a_validation_error(self, client, make_user, valid_answers):
        _, headers = make_user()
        valid_answers["experience"]["numPrevHackathons"] = 10**400
        res = client.put("/users/me/registration", json=valid_answers, headers=headers)
        assert res.status_code == 422
        assert [e["name"] for e in res.json()["errors"]] == ["numPrevHackathons"]

    def test_legacy_registration_reads_as_null(self, client, db, make_user):
        user, headers = make_user()
        stored = db.get(User, user.id)
        stored.registration = {"general": "from an older form"}
        db.commit()

        res = client.get("/users/me/registration", headers=headers)
        assert res.status_code == 200
        assert res.json() is None


class TestRoleAssignment:
    def test_admin_sets_role_and_group(self, client, make_user):
        _, admin_headers = make_user(role=UserRole.ADMIN)
        target, _ = make_user()

        res = client.patch(f"/users/{target.id}/role", json={"role": "hacker"}, headers=admin_headers)
        assert res.status_code == 200
        assert res.json()["role"] == "hacker"

        res = client.patch(f"/users/{target.id}/group", json={"group": "green"}, headers=admin_headers)
        assert res.json()["group"] == "green"

    def test_only_super_admin_grants_admin(self, client, make_user):
        _, admin_headers = make_user(role=UserRole.ADMIN)
        _, super_headers = make_user(role=UserRole.SUPER_ADMIN)
        target, _ = make_user()

        res = client.patch(f"/users/{target.id}/role", json={"role": "admin"}, headers=admin_headers)
        assert res.status_code == 403
        res = client.patch(f"/users/{target.id}/role", json={"role": "admin"}, headers=super_headers)
        assert res.status_code == 200

    def test_creating_a_user_requires_admin(self, client):
        res = client.post("/users/", json={"email": "anon@example.com"})
        assert res.status_code == 401

    def test_new_users_cannot_choose_their_role(self, client, make_user):
        _, admin_headers = make_user(role=UserRole.ADMIN)
        body = {"email": "eve@example.com", "role": "super_admin", "group": "red"}
        assert client.post("/users/", json=body, headers=admin_headers).status_code == 422

        res = client.post("/users/", json={"email": "eve@example.com"}, headers=admin_headers)
        assert res.status_code == 201
        assert (res.json()["role"], res.json()["group"]) == ("none", "none")

    def test_unknown_role_is_rejected(self, client, make_user):
        _, admin_headers = make_user(role=UserRole.ADMIN)
        target, _ = make_user()
        res = client.patch(f"/users/{target.id}/role", json={"role": "owner"}, headers=admin_headers)
        assert res.status_code == 422

    def test_missing_user(self, client, make_user):
        _, admin_headers = make_user(role=UserRole.ADMIN)
        res = client.patch("/users/missing/role", json={"role": "hacker"}, headers=admin_headers)
        assert res.status_code == 404


class TestEventsAndCheckIns:
    def test_event_dates_round_trip(self, client, make_user):
        _, headers = make_user(role=UserRole.ADMIN)
        res = client.post("/events/", json=_event_payload(event_type="workshop"), headers=headers)
        assert res.status_code == 201
        body = res.json()
        assert (body["start_date"], body["end_date"]) == ("2026-03-01", "2026-03-02")
        assert body["event_type"] == "workshop"

        listed = client.get("/events/").json()
        assert [e["id"] for e in listed] == [body["id"]]

    def test_check_in_to_missing_event_is_a_conflict(self, client, make_user):
        admin, headers = make_user(role=UserRole.ADMIN)
        res = client.post("/checkins/", json={"user_id": admin.id, "event_id": 424242}, headers=headers)
        assert res.status_code == 409
        assert res.json()["constraint"] == "foreign_key"

    def test_check_in_and_count(self, client, make_user):
        admin, headers = make_user(role=UserRole.ADMIN)
        event_id = client.post("/events/", json=_event_payload(), headers=headers).json()["id"]

        for _ in range(2):
            res = client.post("/checkins/", json={"user_id": admin.id, "event_id": event_id}, headers=headers)
            assert res.status_code == 201

        count = client.get("/checkins/count", params={"event_id": event_id}, headers=headers).json()
        assert count["count"] == 2

    def test_event_with_check_ins_cannot_be_deleted(self, client, make_user):
        admin, headers = make_user(role=UserRole.ADMIN)
        event_id = client.post("/events/", json=_event_payload(), headers=headers).json()["id"]
        client.post("/checkins/", json={"user_id": admin.id, "event_id": event_id}, headers=headers)

        res = client.delete(f"/events/{event_id}", headers=headers)
        assert res.status_code == 409
        assert res.json()["constraint"] == "foreign_key"
        assert client.get(f"/events/{event_id}").status_code == 200

    def test_sponsors_for_event(self, client, make_user):
        _, headers = make_user(role=UserRole.ADMIN)
        org = client.post("/organizations/", json={"name": "Acme", "level": "gold"}, headers=headers).json()
        assert org["level"] == "gold"
        event_id = client.post("/events/", json=_event_payload(), headers=headers).json()["id"]

        res = client.put(f"/events/{event_id}/sponsors", json={"sponsor_ids": [org["id"]]}, headers=headers)
        assert res.status_code == 200
        assert [s["name"] for s in res.json()["sponsors"]] == ["Acme"]

        res = client.put(f"/events/{event_id}/sponsors", json={"sponsor_ids": [999]}, headers=headers)
        assert res.status_code == 404


class TestAdapterRoutes:
    def test_duplicate_account_is_a_conflict(self, client, make_user):
        admin, headers = make_user(role=UserRole.ADMIN)
        payload = {"user_id": admin.id, "type": "oauth", "provider": "github", "provider_account_id": "1"}
        assert client.post("/accounts/", json=payload, headers=headers).status_code == 201

        res = client.post("/accounts/", json=payload, headers=headers)
        assert res.status_code == 409
        assert res.json()["constraint"] == "unique"

    def test_verification_token_use(self, client, make_user):
        _, headers = make_user(role=UserRole.ADMIN)
        expires = (datetime.now(timezone.utc) + timedelta(hours=1)).isoformat()
        body = {"identifier": "a@example.com", "token": "xyz", "expires": expires}
        assert client.post("/verification-tokens/", json=body, headers=headers).status_code == 201

        use = {"identifier": "a@example.com", "token": "xyz"}
        assert client.post("/verification-tokens/use", json=use, headers=headers).status_code == 200
        assert client.post("/verification-tokens/use", json=use, headers=headers).status_code == 404

    def test_session_lookup(self, client, make_user):
        admin, headers = make_user(role=UserRole.ADMIN)
        token = headers["Authorization"].split()[1]
        res = client.get(f"/sessions/{token}", headers=headers)
        assert res.status_code == 200
        assert res.json()["user"]["id"] == admin.id
