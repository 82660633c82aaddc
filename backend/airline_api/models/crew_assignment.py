from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from airline_api.models.base import Base

class PilotOf(Base):
    __tablename__ = "pilot_of"

    pilot_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    flight_num: Mapped[str] = mapped_column(String(16), ForeignKey("flight.flight_num", ondelete="CASCADE"), primary_key=True)


class StaffOf(Base):
    __tablename__ = "staff_of"

    plane_host_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    flight_num: Mapped[str] = mapped_column(String(16), ForeignKey("flight.flight_num", ondelete="CASCADE"), primary_key=True)
