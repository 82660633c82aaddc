from airline_api.models.base import Base
from airline_api.models.person import Person, Passenger
from airline_api.models.aircraft import Aircraft
from airline_api.models.flight import Flight
from airline_api.models.ticket import Ticket
from airline_api.models.incident import Incident
from airline_api.models.crew_assignment import PilotOf, StaffOf

__all__ = ["Base", "Person", "Passenger", "Aircraft", "Flight", "Ticket", "Incident", "PilotOf", "StaffOf"]
