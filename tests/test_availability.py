from __future__ import annotations

from conftest import add_booking, add_service

from clinicbook import models
from clinicbook.domain.services.schemas import ServiceCreate
from clinicbook.domain.services.service import ServiceCatalog, subtract_booked_slots


def _service(id_: int, name: str, slots: list[str]) -> models.Service:
    return models.Service(id=id_, name=name, slots=slots)


def _booking(treatment: str, slot: str, date: str = "2024-01-01") -> models.Booking:
    return models.Booking(treatment=treatment, slot=slot, date=date, patient="p@x.com")


def test_subtract_keeps_template_order():
    services = [_service(1, "Cleaning", ["8am", "9am", "10am", "11am"])]
    bookings = [_booking("Cleaning", "10am"), _booking("Cleaning", "8am")]

    out = subtract_booked_slots(services, bookings)

    assert [s.slots for s in out] == [["9am", "11am"]]


def test_subtract_only_uses_matching_treatment():
    services = [
        _service(1, "Cleaning", ["9am", "10am"]),
        _service(2, "Surgery", ["9am", "10am"]),
    ]
    bookings = [_booking("Surgery", "9am")]

    out = subtract_booked_slots(services, bookings)

    assert out[0].slots == ["9am", "10am"]
    assert out[1].slots == ["10am"]


def test_fully_booked_service_is_kept_with_no_slots():
    services = [_service(1, "Cleaning", ["9am"])]
    out = subtract_booked_slots(services, [_booking("Cleaning", "9am")])

    assert len(out) == 1
    assert out[0].name == "Cleaning"
    assert out[0].slots == []


def test_subtract_does_not_touch_stored_template():
    service = _service(1, "Cleaning", ["9am", "10am"])
    subtract_booked_slots([service], [_booking("Cleaning", "9am")])

    assert service.slots == ["9am", "10am"]


def test_list_available_only_counts_requested_date(db, session_factory):
    add_service(session_factory, "Cleaning", ["9am", "10am", "11am"])
    add_booking(session_factory, patient="a@x.com", treatment="Cleaning", date="2024-01-01", slot="9am")
    add_booking(session_factory, patient="b@x.com", treatment="Cleaning", date="2024-01-02", slot="10am")

    out = ServiceCatalog(db).list_available("2024-01-01")

    assert [(s.name, s.slots) for s in out] == [("Cleaning", ["10am", "11am"])]

    # Catalog in storage is unchanged
    stored = db.query(models.Service).filter_by(name="Cleaning").one()
    assert stored.slots == ["9am", "10am", "11am"]


def test_list_available_without_bookings_returns_full_templates(db, session_factory):
    add_service(session_factory, "Cleaning", ["9am", "10am"])
    add_service(session_factory, "Whitening", ["1pm"])

    out = ServiceCatalog(db).list_available("2030-05-05")

    assert [(s.name, s.slots) for s in out] == [
        ("Cleaning", ["9am", "10am"]),
        ("Whitening", ["1pm"]),
    ]


def test_create_service_stores_template(db):
    catalog = ServiceCatalog(db)
    created = catalog.create_service(ServiceCreate(name=" Braces ", slots=["9am", "9.30am"]))

    assert created.name == "Braces"
    assert [s.name for s in catalog.list_services()] == ["Braces"]


def test_available_endpoint_scenario(client, session_factory):
    add_service(session_factory, "Cleaning", ["9am", "10am"])
    add_booking(session_factory, patient="a@x.com", treatment="Cleaning", date="2024-01-01", slot="9am")

    resp = client.get("/available", params={"date": "2024-01-01"})

    assert resp.status_code == 200
    data = resp.json()
    assert [{"name": s["name"], "slots": s["slots"]} for s in data] == [
        {"name": "Cleaning", "slots": ["10am"]}
    ]


def test_available_endpoint_requires_date(client):
    resp = client.get("/available")
    assert resp.status_code == 422


def test_services_endpoint_lists_names(client, session_factory):
    add_service(session_factory, "Cleaning", ["9am"])
    add_service(session_factory, "Surgery", ["1pm"])

    resp = client.get("/services")

    assert resp.status_code == 200
    assert [s["name"] for s in resp.json()] == ["Cleaning", "Surgery"]
    assert all("slots" not in s for s in resp.json())
