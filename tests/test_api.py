from __future__ import annotations

from volunteer_tracker.core.exceptions import ConstraintViolationError, StoreUnavailableError


def test_overview_returns_dates_departments_and_views(client):
    res = client.get("/api/overview")
    body = res.get_json()

    assert res.status_code == 200
    assert body["success"] is True
    assert [d["date_id"] for d in body["dates"]] == [10, 11, 12, 13]
    assert body["departments"] == ["concessions", "operations", "unassigned"]
    # Inactive John Doe is hidden unless asked for.
    assert [v["volunteer_id"] for v in body["volunteers"]] == [1, 3, 4]

    alex = body["volunteers"][0]
    assert alex["statuses"] == {"10": "present", "11": "absent", "12": None, "13": None}
    assert alex["summary"]["total"] == 2
    assert alex["summary"]["attendance_rate"] == 50.0
    assert alex["summary"]["attendance_rate_label"] == "50%"


def test_list_volunteers_with_filters(client):
    res = client.get("/api/volunteers?search=jo&department=all&include_inactive=true")
    assert [v["full_name"] for v in res.get_json()["volunteers"]] == ["John Doe", "Joanna Reyes"]

    res = client.get("/api/volunteers?search=jo")
    assert [v["full_name"] for v in res.get_json()["volunteers"]] == ["Joanna Reyes"]


def test_volunteers_by_department(client):
    body = client.get("/api/volunteers/by-department").get_json()
    assert {k: [v["volunteer_id"] for v in vs] for k, vs in body["departments"].items()} == {
        "concessions": [1],
        "operations": [3],
        "unassigned": [4],
    }


def test_volunteer_detail_history(client):
    body = client.get("/api/volunteers/3").get_json()

    assert body["volunteer"]["full_name"] == "Joanna Reyes"
    assert [(h["date"], h["status"]) for h in body["history"]] == [
        ("2026-03-07", "present"),
        ("2026-03-14", "scheduled"),
        ("2026-03-21", None),
        ("2026-03-28", None),
    ]


def test_set_and_clear_status(client, statuses_repo):
    res = client.put("/api/volunteers/4/dates/13/status", json={"status": "scheduled"})
    assert res.status_code == 200
    assert res.get_json()["volunteer"]["summary"]["scheduled"] == 1

    res = client.delete("/api/volunteers/4/dates/13/status")
    assert res.status_code == 200
    assert res.get_json()["volunteer"]["summary"]["total"] == 0
    assert (4, 13) not in statuses_repo.by_pair


def test_set_status_errors(client, statuses_repo):
    assert client.put("/api/volunteers/4/dates/13/status", json={}).status_code == 400
    assert client.put("/api/volunteers/4/dates/13/status", json={"status": "late"}).status_code == 400
    assert client.put("/api/volunteers/404/dates/13/status", json={"status": "present"}).status_code == 404

    statuses_repo.fail_with = ConstraintViolationError("duplicate")
    res = client.put("/api/volunteers/4/dates/13/status", json={"status": "present"})
    assert res.status_code == 409
    assert res.get_json()["success"] is False

    statuses_repo.fail_with = StoreUnavailableError("connection refused")
    assert client.delete("/api/volunteers/1/dates/10/status").status_code == 503


def test_toggle_active(client):
    res = client.post("/api/volunteers/2/toggle-active")
    assert res.status_code == 200
    assert res.get_json()["volunteer"]["is_active"] is True

    assert client.post("/api/volunteers/404/toggle-active").status_code == 404


def test_checkin_desk_and_mark_present(client, monkeypatch):
    from datetime import date

    import volunteer_tracker.checkin.controller as checkin_controller

    monkeypatch.setattr(checkin_controller, "today_local", lambda: date(2026, 3, 10))

    body = client.get("/api/checkin").get_json()
    assert body["game_date"]["date"] == "2026-03-14"
    assert body["is_today"] is False
    assert [v["full_name"] for v in body["roster"]["operations"]] == ["Joanna Reyes"]

    res = client.post("/api/checkin", json={"name": "Alex Baker", "date_id": 11})
    assert res.status_code == 200
    assert res.get_json()["volunteer"]["statuses"]["11"] == "present"

    assert client.post("/api/checkin", json={"name": "Nobody Here", "date_id": 11}).status_code == 404
    assert client.post("/api/checkin", json={}).status_code == 400
    assert client.post("/api/checkin", json={"name": "Alex Baker", "date_id": "x"}).status_code == 400


def test_checkin_suggestions(client):
    body = client.get("/api/checkin/suggestions?q=LEE").get_json()
    assert [v["full_name"] for v in body["suggestions"]] == ["Sam Lee"]


def test_unexpected_error_is_500(client, volunteers_repo, monkeypatch):
    def boom():
        raise RuntimeError("bug")

    monkeypatch.setattr(volunteers_repo, "list_all", boom)
    res = client.get("/api/overview")
    assert res.status_code == 500
    assert res.get_json()["success"] is False
