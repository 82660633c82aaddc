from sqlalchemy import String, ForeignKey, Date, Numeric, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from datetime import date

from airline_api.models.base import Base
from airline_api.models.enums import TicketStatus

class Ticket(Base):
    __tablename__ = "ticket"
    __table_args__ = (
        CheckConstraint("\"class\" IN ('ECONOMY', 'BUSINESS', 'FIRST')", name="ck_ticket_class"),
    )

    ticket_num: Mapped[str] = mapped_column(String(32), primary_key=True)
    price: Mapped[float] = mapped_column(Numeric(10, 2))
    seat_num: Mapped[str] = mapped_column(String(8))
    # "class" is reserved in Python, the column keeps its SQL name
    ticket_class: Mapped[str] = mapped_column("class", String(16))
    date_booked: Mapped[date] = mapped_column(Date)
    status: Mapped[str] = mapped_column(String(16), default=TicketStatus.CONFIRMED.value)
    passenger_ssn: Mapped[str] = mapped_column(String(20), ForeignKey("passenger.ssn"), index=True)
    flight_num: Mapped[str] = mapped_column(String(16), ForeignKey("flight.flight_num"))


def ticket_row(t: Ticket) -> dict:
    return {
        "ticket_num": t.ticket_num,
        "flight_num": t.flight_num,
        "seat_num": t.seat_num,
        "class": t.ticket_class,
        "status": t.status,
        "date_booked": t.date_booked.isoformat() if t.date_booked else None,
    }
