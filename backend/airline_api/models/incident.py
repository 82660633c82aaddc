from sqlalchemy import String, ForeignKey, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime

from airline_api.models.base import Base, utc_now

class Incident(Base):
    __tablename__ = "incident"

    incident_num: Mapped[str] = mapped_column(String(32), primary_key=True)
    time_occurred: Mapped[datetime] = mapped_column(DateTime, default=utc_now)
    description: Mapped[str] = mapped_column(Text)
    tail_number: Mapped[str] = mapped_column(String(16), ForeignKey("aircraft.tail_number"), index=True)
