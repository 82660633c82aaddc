from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import update
from sqlalchemy.orm import Session

from airline_api.api.deps import require_roles
from airline_api.db.session import get_db
from airline_api.models.enums import Role, TicketStatus
from airline_api.models.ticket import Ticket, ticket_row
from airline_api.schemas.auth import SessionClaims
from airline_api.schemas.operations import BookTicketBody
from airline_api.services.ticketing import book_ticket, normalize_class, normalize_text, resolve_passenger_ssn

router = APIRouter()

passenger_only = require_roles(Role.passenger)

@router.get("/tickets")
def my_tickets(db: Session = Depends(get_db), claims: SessionClaims = Depends(passenger_only)):
    ssn = resolve_passenger_ssn(db, claims)
    tickets = (
        db.query(Ticket)
        .filter(Ticket.passenger_ssn == ssn)
        .order_by(Ticket.date_booked.desc(), Ticket.ticket_num.desc())
        .all()
    )
    return [ticket_row(t) for t in tickets]

@router.post("/tickets", status_code=status.HTTP_201_CREATED)
def create_ticket(payload: BookTicketBody, db: Session = Depends(get_db), claims: SessionClaims = Depends(passenger_only)):
    ssn = resolve_passenger_ssn(db, claims)
    flight_num = normalize_text(payload.flight_num)
    seat_num = normalize_text(payload.seat_num)
    ticket_class = normalize_class(payload.ticket_class)
    if not flight_num or not seat_num or not ticket_class:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="flight_num, seat_num, and class are required.")
    ticket = book_ticket(db, ssn, flight_num, seat_num, ticket_class)
    return {
        "ticket_num": ticket.ticket_num,
        "flight_num": flight_num,
        "seat_num": seat_num,
        "class": ticket_class,
        "status": TicketStatus.CONFIRMED.value,
    }

@router.post("/tickets/{ticket_num}/cancel")
def cancel_ticket(ticket_num: str, db: Session = Depends(get_db), claims: SessionClaims = Depends(passenger_only)):
    """Cancel one of the caller's tickets.

    Wrong owner and unknown ticket give the same 404.
    """
    ssn = resolve_passenger_ssn(db, claims)
    result = db.execute(
        update(Ticket)
        .where(Ticket.ticket_num == normalize_text(ticket_num), Ticket.passenger_ssn == ssn)
        .values(status=TicketStatus.CANCELLED.value)
    )
    if not result.rowcount:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ticket not found for this passenger.")
    db.commit()
    return {"message": "Ticket cancelled."}
