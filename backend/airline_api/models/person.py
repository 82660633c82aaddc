from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from airline_api.models.base import Base

class Person(Base):
    __tablename__ = "person"

    ssn: Mapped[str] = mapped_column(String(20), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100), index=True)


class Passenger(Base):
    __tablename__ = "passenger"

    ssn: Mapped[str] = mapped_column(String(20), ForeignKey("person.ssn", ondelete="CASCADE"), primary_key=True)
    passport_num: Mapped[str | None] = mapped_column(String(32), unique=True, nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), index=True, nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
