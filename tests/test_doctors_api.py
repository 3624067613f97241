from __future__ import annotations

from conftest import add_user, auth_headers

DOCTOR = {
    "name": "Dr. Jane Doe",
    "email": "jane@clinic.com",
    "specialty": "Teeth Orthodontics",
    "img": "https://img.example.com/jane.png",
}


def test_admin_can_create_list_and_delete_doctors(client, admin_email):
    headers = auth_headers(admin_email)

    created = client.post("/doctor", json=DOCTOR, headers=headers)
    assert created.status_code == 200
    assert created.json()["acknowledged"] is True
    assert created.json()["insertedId"] > 0

    listed = client.get("/doctors", headers=headers)
    assert listed.status_code == 200
    assert [(d["name"], d["email"], d["specialty"]) for d in listed.json()] == [
        ("Dr. Jane Doe", "jane@clinic.com", "Teeth Orthodontics")
    ]

    deleted = client.delete("/doctors/jane@clinic.com", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"acknowledged": True, "deletedCount": 1}
    assert client.get("/doctors", headers=headers).json() == []


def test_delete_missing_doctor_is_not_an_error(client, admin_email):
    resp = client.delete("/doctors/nobody@clinic.com", headers=auth_headers(admin_email))

    assert resp.status_code == 200
    assert resp.json() == {"acknowledged": True, "deletedCount": 0}


def test_doctor_routes_reject_non_admin(client, session_factory):
    add_user(session_factory, "patient@x.com")
    headers = auth_headers("patient@x.com")

    assert client.post("/doctor", json=DOCTOR, headers=headers).status_code == 403
    assert client.get("/doctors", headers=headers).status_code == 403
    assert client.delete("/doctors/jane@clinic.com", headers=headers).status_code == 403


def test_doctor_routes_require_token(client):
    assert client.post("/doctor", json=DOCTOR).status_code == 401
    assert client.get("/doctors").status_code == 401
    assert client.delete("/doctors/jane@clinic.com").status_code == 401


def test_create_doctor_validates_email(client, admin_email):
    resp = client.post(
        "/doctor", json={**DOCTOR, "email": "broken"}, headers=auth_headers(admin_email)
    )
    assert resp.status_code == 422


def test_delete_with_malformed_email_deletes_nothing(client, admin_email):
    resp = client.delete("/doctors/not-an-email", headers=auth_headers(admin_email))

    assert resp.status_code == 200
    assert resp.json() == {"acknowledged": True, "deletedCount": 0}


def test_create_doctor_rejects_blank_email(client, admin_email):
    resp = client.post("/doctor", json={**DOCTOR, "email": "  "}, headers=auth_headers(admin_email))
    assert resp.status_code == 422
