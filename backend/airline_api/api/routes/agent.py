from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import update
from sqlalchemy.orm import Session

from airline_api.api.deps import require_roles
from airline_api.db.session import get_db
from airline_api.models.enums import Role, TicketStatus
from airline_api.models.ticket import Ticket
from airline_api.schemas.operations import AgentBookTicketBody
from airline_api.services.passenger_lookup import find_passenger_ssn, search_passengers
from airline_api.services.ticketing import book_ticket, normalize_class, normalize_text

router = APIRouter(dependencies=[Depends(require_roles(Role.agent))])

@router.get("/passengers/search")
def passenger_search(q: str | None = None, db: Session = Depends(get_db)):
    """Case-insensitive partial match on ssn, passport, email and names; at most 50 rows."""
    return search_passengers(db, q or "")

@router.post("/tickets", status_code=status.HTTP_201_CREATED)
def book_on_behalf(payload: AgentBookTicketBody, db: Session = Depends(get_db)):
    passenger_query = normalize_text(payload.passenger_query)
    flight_num = normalize_text(payload.flight_num)
    seat_num = normalize_text(payload.seat_num)
    ticket_class = normalize_class(payload.ticket_class)
    if not passenger_query or not flight_num or not seat_num or not ticket_class:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="passenger_query, flight_num, seat_num, and class are required.",
        )
    ssn = find_passenger_ssn(db, passenger_query)
    if not ssn:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Passenger not found.")
    ticket = book_ticket(db, ssn, flight_num, seat_num, ticket_class)
    return {
        "ticket_num": ticket.ticket_num,
        "passenger_ssn": ssn,
        "flight_num": flight_num,
        "seat_num": seat_num,
        "class": ticket_class,
        "status": TicketStatus.CONFIRMED.value,
    }

@router.post("/tickets/{ticket_num}/refund")
def refund_ticket(ticket_num: str, db: Session = Depends(get_db)):
    result = db.execute(
        update(Ticket)
        .where(Ticket.ticket_num == normalize_text(ticket_num))
        .values(status=TicketStatus.REFUNDED.value)
    )
    if not result.rowcount:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ticket not found.")
    db.commit()
    return {"message": "Refund requested."}
