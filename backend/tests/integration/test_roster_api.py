# tests/integration/test_roster_api.py
from __future__ import annotations

import pytest
from ozone_coin.core.extensions import get_class_store
from ozone_coin.services._shared.errors import StoreError
from ozone_coin.services._shared.policies.common import new_id

from tests.helpers.roster_api import change_coins, create_class, create_student


# ------------------------------- Classes ---------------------------------- #
def test_create_and_list_classes(client, auth_header):
    created = create_class(client, auth_header, "  5A ")
    assert set(created) == {"id", "name"}
    assert created["name"] == "5A"

    resp = client.get("/api/classes")
    assert resp.status_code == 200
    assert resp.get_json() == [created]


@pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": "   "}, {"name": None}, {"name": 5}, ["5A"], "5A"])
def test_create_class_requires_name(client, auth_header, payload):
    resp = client.post("/api/classes", json=payload, headers=auth_header)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Name required"}


def test_delete_class_cascades(client, auth_header):
    group = create_class(client, auth_header)
    create_student(client, auth_header, group["id"], "Ali")

    resp = client.delete(f"/api/classes/{group['id']}", headers=auth_header)
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}
    assert client.get("/api/classes").get_json() == []
    assert client.get(f"/api/classes/{group['id']}/students").get_json() == []


@pytest.mark.parametrize("class_id", [None, "not-an-id"])
def test_delete_unknown_class_is_404(client, auth_header, class_id):
    resp = client.delete(f"/api/classes/{class_id or new_id()}", headers=auth_header)
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


def test_listing_students_with_malformed_class_id(app, client):
    resp = client.get("/api/classes/not-an-id/students")
    if app.config["DATABASE_URL"]:
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Invalid class id"}
    else:
        assert resp.status_code == 200
        assert resp.get_json() == []


def test_listings_are_public(client, auth_header):
    group = create_class(client, auth_header)
    assert client.get("/api/classes").status_code == 200
    assert client.get(f"/api/classes/{group['id']}/students").status_code == 200


# ------------------------------- Students --------------------------------- #
def test_coin_scenario_over_http(client, auth_header):
    group = create_class(client, auth_header, "5A")
    ali = create_student(client, auth_header, group["id"], "Ali")
    assert ali == {"id": ali["id"], "name": "Ali", "coins": 0, "class_id": group["id"]}

    resp = change_coins(client, auth_header, ali["id"], 10)
    assert resp.status_code == 200
    assert resp.get_json()["coins"] == 10

    resp = change_coins(client, auth_header, ali["id"], -3)
    assert resp.get_json() == {"id": ali["id"], "name": "Ali", "coins": 7, "class_id": group["id"]}

    client.delete(f"/api/classes/{group['id']}", headers=auth_header)
    assert client.get(f"/api/classes/{group['id']}/students").get_json() == []


def test_students_listed_richest_first(client, auth_header):
    group = create_class(client, auth_header)
    for name, coins in (("Ada", 3), ("Ben", 9), ("Cy", -1)):
        student = create_student(client, auth_header, group["id"], name)
        change_coins(client, auth_header, student["id"], coins)

    listed = client.get(f"/api/classes/{group['id']}/students").get_json()
    assert [s["name"] for s in listed] == ["Ben", "Ada", "Cy"]
    assert [s["coins"] for s in listed] == [9, 3, -1]


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({}, "name and classId required"),
        (["Ali", "0123456789abcdef0123456789abcdef"], "name and classId required"),
        ({"name": "Ali"}, "name and classId required"),
        ({"classId": "x"}, "name and classId required"),
        ({"name": "  ", "classId": "0123456789abcdef0123456789abcdef"}, "name and classId required"),
        ({"name": "Ali", "classId": None}, "name and classId required"),
        ({"name": "Ali", "classId": "garbage"}, "Invalid classId"),
        ({"name": "Ali", "classId": "0123456789abcdef0123456789abcdef"}, "Invalid classId"),
        ({"name": "Ali", "classId": 17}, "Invalid classId"),
    ],
)
def test_create_student_validation(client, auth_header, payload, message):
    resp = client.post("/api/students", json=payload, headers=auth_header)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": message}


def test_unknown_class_stores_nothing(client, auth_header):
    create_class(client, auth_header)
    client.post("/api/students", json={"name": "Ali", "classId": new_id()}, headers=auth_header)
    for group in client.get("/api/classes").get_json():
        assert client.get(f"/api/classes/{group['id']}/students").get_json() == []


def test_delete_student(client, auth_header):
    group = create_class(client, auth_header)
    ali = create_student(client, auth_header, group["id"])

    resp = client.delete(f"/api/students/{ali['id']}", headers=auth_header)
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}
    assert client.get(f"/api/classes/{group['id']}/students").get_json() == []

    again = client.delete(f"/api/students/{ali['id']}", headers=auth_header)
    assert again.status_code == 404


@pytest.mark.parametrize(
    "payload",
    [{}, {"amount": None}, {"amount": "lots"}, {"amount": True}, {"amount": []}, {"amount": 10**30}, [5], 5],
)
def test_coins_require_numeric_amount(client, auth_header, payload):
    group = create_class(client, auth_header)
    ali = create_student(client, auth_header, group["id"])
    resp = client.patch(f"/api/students/{ali['id']}/coins", json=payload, headers=auth_header)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "amount required"}


def test_coins_accept_numeric_strings_and_fractions(client, auth_header):
    group = create_class(client, auth_header)
    ali = create_student(client, auth_header, group["id"])
    assert change_coins(client, auth_header, ali["id"], "4").get_json()["coins"] == 4
    assert change_coins(client, auth_header, ali["id"], 0.5).get_json()["coins"] == 4.5


@pytest.mark.parametrize("student_id", ["0123456789abcdef0123456789abcdef", "nope"])
def test_coins_for_unknown_student_is_404(client, auth_header, student_id):
    resp = change_coins(client, auth_header, student_id, 5)
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


# ------------------------------- Failures --------------------------------- #
def test_store_failure_on_write_reports_details(app, client, auth_header, monkeypatch):
    def fail(name):
        raise StoreError("Failed to create class", cause="database is locked")

    monkeypatch.setattr(get_class_store(), "create_class", fail)
    resp = client.post("/api/classes", json={"name": "5A"}, headers=auth_header)
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to create class", "details": "database is locked"}


def test_unexpected_error_hides_internals(app, client, monkeypatch):
    def explode():
        raise RuntimeError("secret internals")

    monkeypatch.setattr(get_class_store(), "list_classes", explode)
    resp = client.get("/api/classes")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Unexpected error"}
