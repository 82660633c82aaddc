from airline_api.core.security import create_access_token
from airline_api.db.session import SessionLocal
from airline_api.models.ticket import Ticket


def book(client, headers, flight_num="F00001", seat_num="12A", ticket_class="ECONOMY"):
    return client.post(
        "/passenger/tickets",
        json={"flight_num": flight_num, "seat_num": seat_num, "class": ticket_class},
        headers=headers,
    )


def test_book_list_cancel_flow(client, login):
    headers = login("passenger")

    r = book(client, headers)
    assert r.status_code == 201, r.text
    ticket = r.json()
    assert ticket["ticket_num"].startswith("T")
    assert ticket["status"] == "CONFIRMED"
    assert ticket["class"] == "ECONOMY"

    r2 = client.get("/passenger/tickets", headers=headers)
    assert r2.status_code == 200
    rows = r2.json()
    assert len(rows) == 1
    assert rows[0]["ticket_num"] == ticket["ticket_num"]
    assert rows[0]["flight_num"] == "F00001"
    assert rows[0]["status"] == "CONFIRMED"

    r3 = client.post(f"/passenger/tickets/{ticket['ticket_num']}/cancel", headers=headers)
    assert r3.status_code == 200
    assert r3.json() == {"message": "Ticket cancelled."}

    rows = client.get("/passenger/tickets", headers=headers).json()
    assert rows[0]["status"] == "CANCELLED"


def test_ticket_numbers_are_unique(client, login):
    headers = login("passenger")
    nums = {book(client, headers, seat_num=f"{i}C").json()["ticket_num"] for i in range(5)}
    assert len(nums) == 5


def test_class_is_case_insensitive(client, login):
    r = book(client, login("passenger"), ticket_class="business")
    assert r.status_code == 201
    assert r.json()["class"] == "BUSINESS"


def test_book_requires_fields(client, login):
    headers = login("passenger")
    r = client.post("/passenger/tickets", json={"flight_num": "F00001"}, headers=headers)
    assert r.status_code == 400
    assert r.json() == {"message": "flight_num, seat_num, and class are required."}


def test_book_unknown_class_rejected(client, login):
    r = book(client, login("passenger"), ticket_class="PREMIUM")
    assert r.status_code == 400


def test_book_unknown_flight(client, login):
    r = book(client, login("passenger"), flight_num="NOPE1")
    assert r.status_code == 400
    assert r.json() == {"message": "Related record does not exist."}


def test_cannot_cancel_someone_elses_ticket(client, login):
    agent = login("agent")
    r = client.post(
        "/agent/tickets",
        json={"passenger_query": "John Smith", "flight_num": "F00002", "seat_num": "3A", "class": "FIRST"},
        headers=agent,
    )
    assert r.status_code == 201, r.text
    other = r.json()["ticket_num"]

    r2 = client.post(f"/passenger/tickets/{other}/cancel", headers=login("passenger"))
    assert r2.status_code == 404
    assert r2.json() == {"message": "Ticket not found for this passenger."}

    db = SessionLocal()
    try:
        assert db.get(Ticket, other).status == "CONFIRMED"
    finally:
        db.close()


def test_cancel_unknown_ticket(client, login):
    r = client.post("/passenger/tickets/TDOESNOTEXIST/cancel", headers=login("passenger"))
    assert r.status_code == 404


def test_passenger_without_profile(client):
    r = client.post(
        "/auth/register",
        json={"username": "lonely", "password": "pw", "name": "Lonely", "email": "lonely@example.com", "role": "passenger"},
    )
    assert r.status_code == 201
    token = client.post("/auth/login", json={"username": "lonely", "password": "pw"}).json()["token"]
    r2 = client.get("/passenger/tickets", headers={"Authorization": f"Bearer {token}"})
    assert r2.status_code == 404
    assert r2.json() == {"message": "Passenger profile not found."}


def test_passenger_token_without_identity(client):
    token = create_access_token("anon", "passenger")
    r = client.get("/passenger/tickets", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 400
    assert r.json() == {"message": "Passenger identity missing in token."}


def test_token_ssn_takes_precedence(client):
    token = create_access_token("john", "passenger", claims={"ssn": "222-33-4444"})
    headers = {"Authorization": f"Bearer {token}"}
    assert book(client, headers, flight_num="F00003").status_code == 201
    rows = client.get("/passenger/tickets", headers=headers).json()
    assert [r["flight_num"] for r in rows] == ["F00003"]


def test_other_roles_cannot_use_passenger_routes(client, login):
    r = client.get("/passenger/tickets", headers=login("crew"))
    assert r.status_code == 403
