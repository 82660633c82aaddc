import logging
from datetime import timedelta
from sqlalchemy.orm import Session

from airline_api.db.session import engine, SessionLocal
from airline_api.models.base import utc_now
from airline_api.models import Base, Aircraft, Flight, Passenger, Person, PilotOf, StaffOf
from airline_api.models.enums import FlightStatus
from airline_api.core.config import settings

logger = logging.getLogger(__name__)

DEMO_PASSENGER_SSN = "111-22-3333"

def create_tables():
    Base.metadata.create_all(bind=engine)

def _ensure(db: Session, model_cls, key, **fields):
    obj = db.get(model_cls, key)
    if obj is None:
        obj = model_cls(**fields)
        db.add(obj)
    return obj

def seed_demo_data(db: Session | None = None):
    """Idempotent demo catalog: aircraft, passengers, flights and crew assignments.

    The demo passenger matches the built-in 'passenger' login through its email
    (or DEMO_PASSENGER_SSN when set).
    """
    own_session = db is None
    if own_session:
        db = SessionLocal()
    try:
        _ensure(db, Aircraft, "N101AA", tail_number="N101AA", id="AC-1", model="Airbus A320", capacity=180, status="ACTIVE")
        _ensure(db, Aircraft, "N202BB", tail_number="N202BB", id="AC-2", model="Boeing 737-800", capacity=160, status="ACTIVE")

        passenger_ssn = settings.demo_passenger_ssn or DEMO_PASSENGER_SSN
        people = [
            (passenger_ssn, "Pat", "Passenger", "P1000001", settings.demo_passenger_email, "555-0100"),
            ("222-33-4444", "John", "Smith", "P2000002", "john.smith@example.com", "555-0101"),
            ("333-44-5555", "Anna", "Smithson", "P3000003", "anna.s@example.com", "555-0102"),
        ]
        for ssn, first, last, passport, email, phone in people:
            _ensure(db, Person, ssn, ssn=ssn, first_name=first, last_name=last)
            db.flush()
            _ensure(db, Passenger, ssn, ssn=ssn, passport_num=passport, email=email, phone=phone)

        base = utc_now().replace(minute=0, second=0, microsecond=0) + timedelta(days=1)
        flights = [
            ("F00001", base, base + timedelta(hours=2), "MSY", "ATL", "A1", "1", "N101AA"),
            ("F00002", base + timedelta(hours=4), base + timedelta(hours=6), "ATL", "MSY", "B4", "2", "N202BB"),
            ("F00003", base + timedelta(days=1), base + timedelta(days=1, hours=3), "MSY", "DFW", None, None, "N101AA"),
        ]
        for num, dep, arr, origin, dest, gate, terminal, tail in flights:
            _ensure(
                db, Flight, num,
                flight_num=num, depart_time=dep, arrival_time=arr, origin=origin, destination=dest,
                status=FlightStatus.SCHEDULED.value, gate=gate, terminal=terminal, tail_number=tail,
            )
        db.flush()

        if settings.demo_crew_id:
            _ensure(db, PilotOf, (settings.demo_crew_id, "F00001"), pilot_id=settings.demo_crew_id, flight_num="F00001")
            _ensure(db, StaffOf, (settings.demo_crew_id, "F00002"), plane_host_id=settings.demo_crew_id, flight_num="F00002")
        db.commit()
        logger.info("Demo data ensured")
    finally:
        if own_session:
            db.close()
