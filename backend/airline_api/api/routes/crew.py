
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select, union, update
from sqlalchemy.orm import Session

from airline_api.api.deps import require_roles
from airline_api.db.session import get_db
from airline_api.models.base import utc_now
from airline_api.models.crew_assignment import PilotOf, StaffOf
from airline_api.models.enums import FlightStatus, Role, parse_enum
from airline_api.models.flight import Flight, flight_row
from airline_api.models.incident import Incident
from airline_api.schemas.auth import SessionClaims
from airline_api.schemas.operations import FlightStatusBody, IncidentBody
from airline_api.services.ticketing import gen_incident_num, normalize_text

crew_only = require_roles(Role.crew)

router = APIRouter(dependencies=[Depends(crew_only)])

@router.get("/schedule")
def crew_schedule(db: Session = Depends(get_db), claims: SessionClaims = Depends(crew_only)):
    """Flights the caller flies or staffs.

    A token without employee_id sees every flight.
    """
    employee_id = normalize_text(claims.employee_id)
    q = db.query(Flight)
    if employee_id:
        assigned = union(
            select(PilotOf.flight_num).where(PilotOf.pilot_id == employee_id),
            select(StaffOf.flight_num).where(StaffOf.plane_host_id == employee_id),
        )
        q = q.filter(Flight.flight_num.in_(select(assigned.subquery().c.flight_num)))
    flights = q.order_by(Flight.depart_time.asc(), Flight.flight_num.asc()).all()
    return [flight_row(f) for f in flights]

@router.post("/flights/{flight_num}/status")
def update_flight_status(flight_num: str, payload: FlightStatusBody, db: Session = Depends(get_db)):
    raw = normalize_text(payload.status)
    if not raw:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="status is required.")
    new_status = parse_enum(FlightStatus, raw)
    if new_status is None:
        allowed = ", ".join(s.value for s in FlightStatus)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid status. Must be one of {allowed}.")
    result = db.execute(
        update(Flight)
        .where(Flight.flight_num == normalize_text(flight_num))
        .values(status=new_status.value)
    )
    if not result.rowcount:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Flight not found.")
    db.commit()
    return {"message": "Flight status updated."}

@router.post("/incidents", status_code=status.HTTP_201_CREATED)
def report_incident(payload: IncidentBody, db: Session = Depends(get_db)):
    tail_number = normalize_text(payload.tail_number)
    description = normalize_text(payload.description)
    if not tail_number or not description:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="tail_number and description are required.")
    incident = Incident(
        incident_num=gen_incident_num(),
        time_occurred=utc_now(),
        description=description,
        tail_number=tail_number,
    )
    db.add(incident)
    db.commit()
    return {"incident_num": incident.incident_num, "message": "Incident submitted."}
