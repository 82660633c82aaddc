from sqlalchemy import String, ForeignKey, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime

from airline_api.models.base import Base
from airline_api.models.enums import FlightStatus

class Flight(Base):
    __tablename__ = "flight"

    flight_num: Mapped[str] = mapped_column(String(16), primary_key=True)
    depart_time: Mapped[datetime] = mapped_column(DateTime, index=True)
    arrival_time: Mapped[datetime] = mapped_column(DateTime)
    origin: Mapped[str] = mapped_column(String(64), index=True)
    destination: Mapped[str] = mapped_column(String(64), index=True)
    status: Mapped[str] = mapped_column(String(16), default=FlightStatus.SCHEDULED.value)
    gate: Mapped[str | None] = mapped_column(String(8), nullable=True)
    terminal: Mapped[str | None] = mapped_column(String(8), nullable=True)
    tail_number: Mapped[str] = mapped_column(String(16), ForeignKey("aircraft.tail_number"))


def flight_row(f: Flight) -> dict:
    return {
        "flight_num": f.flight_num,
        "depart_time": f.depart_time.isoformat(),
        "arrival_time": f.arrival_time.isoformat(),
        "origin": f.origin,
        "destination": f.destination,
        "status": f.status,
        "gate": f.gate,
        "terminal": f.terminal,
        "tail_number": f.tail_number,
    }
