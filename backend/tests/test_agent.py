from airline_api.db.session import SessionLocal
from airline_api.models.person import Passenger, Person


def test_passenger_search_partial_and_case_insensitive(client, login):
    r = client.get("/agent/passengers/search", params={"q": "SMITH"}, headers=login("agent"))
    assert r.status_code == 200
    rows = r.json()
    assert [p["last_name"] for p in rows] == ["Smith", "Smithson"]
    assert set(rows[0]) == {"ssn", "first_name", "last_name", "passport_num", "email", "phone"}


def test_passenger_search_by_ssn_passport_email_and_full_name(client, login):
    headers = login("agent")
    for q in ("222-33", "p2000002", "john.smith@", "john smith"):
        rows = client.get("/agent/passengers/search", params={"q": q}, headers=headers).json()
        assert [p["ssn"] for p in rows] == ["222-33-4444"], q


def test_passenger_search_blank_query(client, login):
    r = client.get("/agent/passengers/search", params={"q": "  "}, headers=login("agent"))
    assert r.status_code == 200
    assert r.json() == []


def test_passenger_search_treats_wildcards_literally(client, login):
    r = client.get("/agent/passengers/search", params={"q": "%"}, headers=login("agent"))
    assert r.json() == []


def test_book_on_behalf_and_refund(client, login):
    headers = login("agent")
    r = client.post(
        "/agent/tickets",
        json={"passenger_query": "john.smith@example.com", "flight_num": "F00001", "seat_num": "7B", "class": "economy"},
        headers=headers,
    )
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["passenger_ssn"] == "222-33-4444"
    assert body["class"] == "ECONOMY"
    assert body["status"] == "CONFIRMED"

    r2 = client.post(f"/agent/tickets/{body['ticket_num']}/refund", headers=headers)
    assert r2.status_code == 200
    assert r2.json() == {"message": "Refund requested."}

    # Refund works on any status
    r3 = client.post(f"/agent/tickets/{body['ticket_num']}/refund", headers=headers)
    assert r3.status_code == 200


def test_refund_shows_up_for_passenger(client, login):
    passenger = login("passenger")
    ticket_num = client.post(
        "/passenger/tickets",
        json={"flight_num": "F00002", "seat_num": "1A", "class": "FIRST"},
        headers=passenger,
    ).json()["ticket_num"]
    client.post(f"/agent/tickets/{ticket_num}/refund", headers=login("agent"))
    rows = client.get("/passenger/tickets", headers=passenger).json()
    assert rows[0]["status"] == "REFUNDED"


def test_book_on_behalf_unknown_passenger(client, login):
    r = client.post(
        "/agent/tickets",
        json={"passenger_query": "nobody-here", "flight_num": "F00001", "seat_num": "7B", "class": "ECONOMY"},
        headers=login("agent"),
    )
    assert r.status_code == 404
    assert r.json() == {"message": "Passenger not found."}


def test_book_on_behalf_requires_fields(client, login):
    r = client.post("/agent/tickets", json={"passenger_query": "Smith"}, headers=login("agent"))
    assert r.status_code == 400
    assert "required" in r.json()["message"]


def test_refund_unknown_ticket(client, login):
    r = client.post("/agent/tickets/TNOPE/refund", headers=login("agent"))
    assert r.status_code == 404
    assert r.json() == {"message": "Ticket not found."}


def test_agent_routes_need_agent_role(client, login):
    r = client.get("/agent/passengers/search", params={"q": "smith"}, headers=login("passenger"))
    assert r.status_code == 403
    assert client.get("/agent/passengers/search", params={"q": "smith"}).status_code == 401


def test_passenger_search_caps_at_fifty_rows(client, login):
    db = SessionLocal()
    for i in range(60):
        ssn = f"900-00-{i:04d}"
        db.add(Person(ssn=ssn, first_name=f"Kim{i:02d}", last_name="Smithy"))
        db.flush()
        db.add(Passenger(ssn=ssn, email=f"smithy{i}@example.com"))
    db.commit()
    db.close()

    rows = client.get("/agent/passengers/search", params={"q": "smithy"}, headers=login("agent")).json()
    assert len(rows) == 50
    assert [p["first_name"] for p in rows] == [f"Kim{i:02d}" for i in range(50)]
