import uuid
from datetime import date

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from airline_api.core.config import settings
from airline_api.models.enums import TicketClass, TicketStatus, parse_enum
from airline_api.models.person import Passenger
from airline_api.models.ticket import Ticket
from airline_api.schemas.auth import SessionClaims


def normalize_text(value) -> str:
    return str(value or "").strip()


def normalize_class(value) -> str:
    """Return the canonical cabin class, or '' when the value is not one of the three classes."""
    ticket_class = parse_enum(TicketClass, value)
    return ticket_class.value if ticket_class else ""


def gen_ticket_num() -> str:
    return "T" + uuid.uuid4().hex[:16].upper()


def gen_incident_num() -> str:
    return "I" + uuid.uuid4().hex[:16].upper()


def resolve_passenger_ssn(db: Session, claims: SessionClaims) -> str:
    """Passenger ssn from the token, falling back to a lookup by the token email."""
    ssn = normalize_text(claims.ssn)
    if ssn:
        return ssn
    email = normalize_text(claims.email)
    if not email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Passenger identity missing in token.")
    p = db.query(Passenger).filter(Passenger.email == email).first()
    if not p:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Passenger profile not found.")
    return p.ssn


def book_ticket(db: Session, passenger_ssn: str, flight_num: str, seat_num: str, ticket_class: str) -> Ticket:
    """Insert a CONFIRMED ticket at the default price.

    Unknown flight or passenger surface as IntegrityError and are mapped to 400 by the app handlers.
    """
    ticket = Ticket(
        ticket_num=gen_ticket_num(),
        price=settings.default_ticket_price,
        seat_num=seat_num,
        ticket_class=ticket_class,
        date_booked=date.today(),
        status=TicketStatus.CONFIRMED.value,
        passenger_ssn=passenger_ssn,
        flight_num=flight_num,
    )
    db.add(ticket)
    db.commit()
    return ticket
