from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from airline_api.models.base import Base

class Aircraft(Base):
    __tablename__ = "aircraft"

    tail_number: Mapped[str] = mapped_column(String(16), primary_key=True)
    # Fleet identifier, distinct from the registration mark
    id: Mapped[str | None] = mapped_column(String(32), nullable=True)
    model: Mapped[str] = mapped_column(String(64))
    capacity: Mapped[int] = mapped_column(Integer)
    status: Mapped[str] = mapped_column(String(32), default="ACTIVE")
