"""Response parsing for the client.

List endpoints answer a bare JSON array. ``parse_rows`` also accepts an object
wrapping the array under exactly one known envelope key; any other shape is an
error instead of being silently read as "no rows".
"""
from typing import Any, Iterable, Sequence

import pandas as pd

ENVELOPE_KEYS = ("data", "items", "results", "rows")


class ResponseShapeError(ValueError):
    pass


def parse_rows(payload: Any) -> list[dict]:
    if payload is None:
        return []
    if isinstance(payload, list):
        if not all(isinstance(r, dict) for r in payload):
            raise ResponseShapeError("Expected a list of objects.")
        return payload
    if isinstance(payload, dict):
        present = [k for k in ENVELOPE_KEYS if k in payload]
        if len(present) == 1 and isinstance(payload[present[0]], list):
            return parse_rows(payload[present[0]])
        if len(present) > 1:
            raise ResponseShapeError(f"Ambiguous response envelope: {', '.join(present)}.")
    raise ResponseShapeError("Unexpected response shape.")


def _pick(row: dict, keys: tuple[str, ...]) -> Any:
    for key in keys:
        if row.get(key) is not None:
            return row[key]
    return ""


def normalize_flight(row: dict) -> dict:
    return {
        "flight_num": _pick(row, ("flight_num", "flightNum")),
        "depart_time": _pick(row, ("depart_time", "departTime")),
        "arrival_time": _pick(row, ("arrival_time", "arrivalTime")),
        "origin": _pick(row, ("origin", "from")),
        "destination": _pick(row, ("destination", "to")),
        "status": _pick(row, ("status",)),
        "gate": _pick(row, ("gate",)),
        "terminal": _pick(row, ("terminal",)),
        "tail_number": _pick(row, ("tail_number", "tailNumber")),
    }


def normalize_ticket(row: dict) -> dict:
    return {
        "ticket_num": _pick(row, ("ticket_num", "ticketNum")),
        "flight_num": _pick(row, ("flight_num", "flightNum")),
        "seat_num": _pick(row, ("seat_num", "seatNum")),
        "class": _pick(row, ("class", "ticket_class", "cabin_class")),
        "status": _pick(row, ("status",)),
        "date_booked": _pick(row, ("date_booked", "dateBooked", "created_at")),
    }


def normalize_passenger(row: dict) -> dict:
    first = _pick(row, ("first_name", "firstName"))
    last = _pick(row, ("last_name", "lastName"))
    name = _pick(row, ("name",))
    # Split a single "name" field when first/last are absent
    if (not first or not last) and name:
        parts = str(name).split()
        first = first or (parts[0] if parts else "")
        last = last or " ".join(parts[1:])
    return {
        "ssn": _pick(row, ("ssn",)),
        "first_name": first,
        "last_name": last,
        "passport_num": _pick(row, ("passport_num", "passportNum")),
        "email": _pick(row, ("email",)),
        "phone": _pick(row, ("phone",)),
    }


def normalize_aircraft(row: dict) -> dict:
    return {
        "tail_number": _pick(row, ("tail_number", "tailNumber")),
        "id": _pick(row, ("id",)),
        "model": _pick(row, ("model",)),
        "capacity": _pick(row, ("capacity",)),
        "status": _pick(row, ("status",)),
    }


def to_frame(rows: Iterable[dict], columns: Sequence[str]) -> pd.DataFrame:
    """Table for display: exactly ``columns``, in order, missing values blank."""
    return pd.DataFrame(list(rows), columns=list(columns)).fillna("")
