"""HTTP gateway used by the client views.

Every call goes through ``Gateway.request``: it attaches the bearer token from
the session store, serializes JSON bodies, drops blank query values and turns
both transport failures and non-2xx answers into ``ApiRequestError``.
"""
import json
import logging
import re
from typing import Any, Callable, Optional
from urllib.parse import quote

import httpx

from airline_api.client.config import API_BASE_URL
from airline_api.client.rows import ResponseShapeError, parse_rows
from airline_api.client.session_store import ClientSession, SessionStore

logger = logging.getLogger(__name__)


ENDPOINTS = {
    "login": "/auth/login",
    "register": "/auth/register",
    "search_flights": "/flights/search",
    "passenger_tickets": "/passenger/tickets",
    "cancel_ticket": lambda ticket_num: f"/passenger/tickets/{quote(ticket_num, safe='')}/cancel",
    "agent_passenger_search": "/agent/passengers/search",
    "agent_tickets": "/agent/tickets",
    "agent_refund": lambda ticket_num: f"/agent/tickets/{quote(ticket_num, safe='')}/refund",
    "crew_schedule": "/crew/schedule",
    "crew_flight_status": lambda flight_num: f"/crew/flights/{quote(flight_num, safe='')}/status",
    "crew_incidents": "/crew/incidents",
    "admin_flights": "/admin/flights",
    "admin_aircraft": "/admin/aircraft",
}

_FIELD_WORDS = re.compile(r"\b(origin|destination|from|to)\b")
_REASON_WORDS = re.compile(r"\b(missing|required|invalid)\b")


class ApiRequestError(Exception):
    """A request that failed at the transport level (status_code None) or with a non-2xx answer."""

    def __init__(self, message: str, status_code: int | None = None, data: Any = None):
        self.message = message
        self.status_code = status_code
        self.data = data
        super().__init__(self.message)


def error_message(payload: Any, status_code: int) -> str:
    if isinstance(payload, str) and payload:
        return payload
    if isinstance(payload, dict):
        for key in ("message", "error", "detail"):
            if isinstance(payload.get(key), str) and payload[key]:
                return payload[key]
    return f"Request failed ({status_code})"


def should_retry_with_from_to(error: ApiRequestError) -> bool:
    """True when the server rejected the origin/destination naming itself."""
    if error.status_code is None:
        return False
    try:
        body = json.dumps(error.data)
    except (TypeError, ValueError):
        body = ""
    text = f"{error.message} {body}".lower()
    return bool(_FIELD_WORDS.search(text) and _REASON_WORDS.search(text))


class Gateway:
    def __init__(
        self,
        base_url: str = API_BASE_URL,
        store: SessionStore | None = None,
        http: httpx.Client | None = None,
        timeout: float = 10.0,
        on_error: Optional[Callable[[str], None]] = None,
    ):
        self.store = store or SessionStore()
        self.http = http or httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)
        self.on_error = on_error
        self.last_url = "-"
        self.last_error = "-"

    def _fail(self, message: str, status_code: int | None = None, data: Any = None) -> ApiRequestError:
        self.last_error = message or "-"
        if self.on_error:
            self.on_error(message or "Request failed.")
        return ApiRequestError(message or "Request failed.", status_code, data)

    def request(self, method: str, path: str, query: dict | None = None, body: dict | None = None) -> Any:
        headers = {"Accept": "application/json"}
        session = self.store.load()
        if session.token:
            headers["Authorization"] = f"Bearer {session.token}"
        params = {k: str(v) for k, v in (query or {}).items() if v is not None and str(v).strip() != ""}
        req = self.http.build_request(method, path, params=params or None, json=body, headers=headers)
        self.last_url = str(req.url)
        try:
            resp = self.http.send(req)
        except httpx.RequestError as e:
            raise self._fail(f"Network error: {e}") from e

        payload: Any = None
        if resp.text:
            try:
                payload = resp.json()
            except ValueError:
                payload = {"message": resp.text}
        if resp.is_error:
            raise self._fail(error_message(payload, resp.status_code), resp.status_code, payload)
        return payload

    def rows(self, method: str, path: str, query: dict | None = None) -> list[dict]:
        payload = self.request(method, path, query=query)
        try:
            return parse_rows(payload)
        except ResponseShapeError as e:
            raise self._fail(str(e), data=payload) from e

    # auth

    def login(self, username: str, password: str) -> ClientSession:
        payload = self.request("POST", ENDPOINTS["login"], body={"username": username, "password": password}) or {}
        token = payload.get("token")
        role = str(payload.get("role") or "").lower()
        if not token or not role:
            raise self._fail("Login response missing token/role.", data=payload)
        session = ClientSession(token=token, role=role, name=payload.get("name") or "", email=payload.get("email") or "")
        self.store.save(session)
        return session

    def logout(self) -> None:
        self.store.clear()

    def register(self, username: str, password: str, name: str, email: str, role: str) -> dict:
        body = {"username": username, "password": password, "name": name, "email": email, "role": role}
        return self.request("POST", ENDPOINTS["register"], body=body)

    # flights

    def search_flights(self, origin: str = "", destination: str = "", date: str = "") -> list[dict]:
        """Search with origin/destination, retrying once with from/to if the server rejects those names."""
        try:
            return self.rows("GET", ENDPOINTS["search_flights"], {"origin": origin, "destination": destination, "date": date})
        except ApiRequestError as e:
            if not should_retry_with_from_to(e):
                raise
            logger.info("Retrying flight search with from/to params")
        return self.rows("GET", ENDPOINTS["search_flights"], {"from": origin, "to": destination, "date": date})

    # passenger

    def my_tickets(self) -> list[dict]:
        return self.rows("GET", ENDPOINTS["passenger_tickets"])

    def book_ticket(self, flight_num: str, seat_num: str, ticket_class: str) -> dict:
        body = {"flight_num": flight_num, "seat_num": seat_num, "class": ticket_class}
        return self.request("POST", ENDPOINTS["passenger_tickets"], body=body)

    def cancel_ticket(self, ticket_num: str) -> dict:
        return self.request("POST", ENDPOINTS["cancel_ticket"](ticket_num))

    # agent

    def search_passengers(self, q: str) -> list[dict]:
        return self.rows("GET", ENDPOINTS["agent_passenger_search"], {"q": q})

    def book_on_behalf(self, passenger_query: str, flight_num: str, seat_num: str, ticket_class: str) -> dict:
        body = {
            "passenger_query": passenger_query,
            "flight_num": flight_num,
            "seat_num": seat_num,
            "class": ticket_class,
        }
        return self.request("POST", ENDPOINTS["agent_tickets"], body=body)

    def refund_ticket(self, ticket_num: str) -> dict:
        return self.request("POST", ENDPOINTS["agent_refund"](ticket_num))

    # crew

    def crew_schedule(self) -> list[dict]:
        return self.rows("GET", ENDPOINTS["crew_schedule"])

    def update_flight_status(self, flight_num: str, status: str) -> dict:
        return self.request("POST", ENDPOINTS["crew_flight_status"](flight_num), body={"status": status})

    def report_incident(self, tail_number: str, description: str) -> dict:
        body = {"tail_number": tail_number, "description": description}
        return self.request("POST", ENDPOINTS["crew_incidents"], body=body)

    # admin

    def admin_flights(self) -> list[dict]:
        return self.rows("GET", ENDPOINTS["admin_flights"])

    def create_flight(self, **fields: Any) -> dict:
        return self.request("POST", ENDPOINTS["admin_flights"], body=fields)

    def admin_aircraft(self) -> list[dict]:
        return self.rows("GET", ENDPOINTS["admin_aircraft"])
