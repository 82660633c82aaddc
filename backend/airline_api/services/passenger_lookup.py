"""Fuzzy passenger lookup shared by the agent search and agent booking endpoints."""
from sqlalchemy import or_
from sqlalchemy.orm import Session

from airline_api.models.person import Passenger, Person

MAX_SEARCH_ROWS = 50


def _matching_passengers(db: Session, query: str):
    full_name = Person.first_name + " " + Person.last_name
    # icontains(autoescape=True) keeps % and _ in the query literal
    return (
        db.query(Passenger, Person)
        .join(Person, Person.ssn == Passenger.ssn)
        .filter(
            or_(
                Passenger.ssn.icontains(query, autoescape=True),
                Passenger.passport_num.icontains(query, autoescape=True),
                Passenger.email.icontains(query, autoescape=True),
                Person.first_name.icontains(query, autoescape=True),
                Person.last_name.icontains(query, autoescape=True),
                full_name.icontains(query, autoescape=True),
            )
        )
        .order_by(Person.last_name.asc(), Person.first_name.asc(), Passenger.ssn.asc())
    )


def search_passengers(db: Session, query: str) -> list[dict]:
    query = (query or "").strip()
    if not query:
        return []
    rows = _matching_passengers(db, query).limit(MAX_SEARCH_ROWS).all()
    return [
        {
            "ssn": p.ssn,
            "first_name": pe.first_name,
            "last_name": pe.last_name,
            "passport_num": p.passport_num,
            "email": p.email,
            "phone": p.phone,
        }
        for p, pe in rows
    ]


def find_passenger_ssn(db: Session, query: str) -> str:
    """Return the ssn of the first match in search order, or '' when nothing matches."""
    query = (query or "").strip()
    if not query:
        return ""
    row = _matching_passengers(db, query).first()
    return row[0].ssn if row else ""
