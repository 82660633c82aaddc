from airline_api.core.security import create_access_token
from airline_api.db.session import SessionLocal
from airline_api.models.base import utc_now
from airline_api.models.incident import Incident


def test_schedule_lists_assigned_flights(client, login):
    r = client.get("/crew/schedule", headers=login("crew"))
    assert r.status_code == 200
    assert [f["flight_num"] for f in r.json()] == ["F00001", "F00002"]


def test_schedule_without_employee_id_lists_all(client):
    token = create_access_token("temp-crew", "crew")
    r = client.get("/crew/schedule", headers={"Authorization": f"Bearer {token}"})
    assert [f["flight_num"] for f in r.json()] == ["F00001", "F00002", "F00003"]


def test_schedule_for_unassigned_employee_is_empty(client):
    token = create_access_token("e9", "crew", claims={"employee_id": "E9999"})
    r = client.get("/crew/schedule", headers={"Authorization": f"Bearer {token}"})
    assert r.json() == []


def test_update_flight_status(client, login):
    r = client.post("/crew/flights/F00003/status", json={"status": "delayed"}, headers=login("crew"))
    assert r.status_code == 200
    assert r.json() == {"message": "Flight status updated."}
    rows = client.get("/flights/search", params={"destination": "DFW"}).json()
    assert rows[0]["status"] == "DELAYED"


def test_update_flight_status_rejects_unknown_value(client, login):
    r = client.post("/crew/flights/F00001/status", json={"status": "TELEPORTED"}, headers=login("crew"))
    assert r.status_code == 400
    assert r.json()["message"].startswith("Invalid status. Must be one of SCHEDULED")


def test_update_flight_status_requires_value(client, login):
    r = client.post("/crew/flights/F00001/status", json={"status": "  "}, headers=login("crew"))
    assert r.status_code == 400
    assert r.json() == {"message": "status is required."}


def test_update_unknown_flight(client, login):
    r = client.post("/crew/flights/ZZ999/status", json={"status": "BOARDING"}, headers=login("crew"))
    assert r.status_code == 404
    assert r.json() == {"message": "Flight not found."}


def test_report_incident(client, login):
    r = client.post(
        "/crew/incidents",
        json={"tail_number": "N101AA", "description": "Bird strike on approach"},
        headers=login("crew"),
    )
    assert r.status_code == 201
    body = r.json()
    assert body["incident_num"].startswith("I")
    assert body["message"] == "Incident submitted."


def test_report_incident_unknown_aircraft(client, login):
    r = client.post(
        "/crew/incidents",
        json={"tail_number": "N000XX", "description": "Hydraulics"},
        headers=login("crew"),
    )
    assert r.status_code == 400
    assert r.json() == {"message": "Related record does not exist."}


def test_report_incident_requires_fields(client, login):
    r = client.post("/crew/incidents", json={"tail_number": "N101AA"}, headers=login("crew"))
    assert r.status_code == 400


def test_crew_routes_need_crew_role(client, login):
    r = client.post("/crew/flights/F00001/status", json={"status": "BOARDING"}, headers=login("agent"))
    assert r.status_code == 403


def test_incident_time_is_naive_utc(client, login):
    before = utc_now()
    r = client.post(
        "/crew/incidents",
        json={"tail_number": "N202BB", "description": "Cabin pressure warning"},
        headers=login("crew"),
    )
    assert r.status_code == 201
    db = SessionLocal()
    try:
        occurred = db.get(Incident, r.json()["incident_num"]).time_occurred
    finally:
        db.close()
    assert occurred.tzinfo is None
    assert before <= occurred <= utc_now()
