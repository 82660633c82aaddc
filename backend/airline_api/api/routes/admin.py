from typing import List
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from airline_api.api.deps import require_roles
from airline_api.db.session import get_db
from airline_api.models.aircraft import Aircraft
from airline_api.models.enums import FlightStatus, Role, parse_enum
from airline_api.models.flight import Flight, flight_row
from airline_api.schemas.operations import CreateFlightBody
from airline_api.services.ticketing import normalize_text

router = APIRouter(dependencies=[Depends(require_roles(Role.admin))])


def _parse_timestamp(value: str, label: str) -> datetime:
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid {label}; expected ISO 8601")
    # Stored naive in UTC
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


@router.get("/flights", response_model=List[dict])
def list_flights(db: Session = Depends(get_db)):
    flights = db.query(Flight).order_by(Flight.depart_time.asc(), Flight.flight_num.asc()).all()
    return [flight_row(f) for f in flights]


@router.post("/flights", status_code=status.HTTP_201_CREATED)
def create_flight(payload: CreateFlightBody, db: Session = Depends(get_db)):
    """Create a flight.

    Duplicate flight_num answers 409 and an unknown tail_number 400, both via the
    store constraints.
    """
    flight_num = normalize_text(payload.flight_num)
    depart_raw = normalize_text(payload.depart_time)
    arrival_raw = normalize_text(payload.arrival_time)
    origin = normalize_text(payload.origin)
    destination = normalize_text(payload.destination)
    tail_number = normalize_text(payload.tail_number)
    if not all([flight_num, depart_raw, arrival_raw, origin, destination, tail_number]):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="flight_num, depart_time, arrival_time, origin, destination, and tail_number are required.",
        )
    flight_status = FlightStatus.SCHEDULED
    if normalize_text(payload.status):
        flight_status = parse_enum(FlightStatus, payload.status)
        if flight_status is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid flight status.")
    f = Flight(
        flight_num=flight_num,
        depart_time=_parse_timestamp(depart_raw, "depart_time"),
        arrival_time=_parse_timestamp(arrival_raw, "arrival_time"),
        origin=origin,
        destination=destination,
        status=flight_status.value,
        gate=normalize_text(payload.gate) or None,
        terminal=normalize_text(payload.terminal) or None,
        tail_number=tail_number,
    )
    db.add(f)
    db.commit()
    return {"message": "Flight created.", "flight_num": flight_num}


@router.get("/aircraft", response_model=List[dict])
def list_aircraft(db: Session = Depends(get_db)):
    planes = db.query(Aircraft).order_by(Aircraft.tail_number.asc()).all()
    return [
        {"tail_number": a.tail_number, "id": a.id, "model": a.model, "capacity": a.capacity, "status": a.status}
        for a in planes
    ]
