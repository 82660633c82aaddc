from pydantic import BaseModel, Field

# Request bodies keep every field optional: presence and format are checked in the
# handlers so that missing values answer 400 with a readable message.

class BookTicketBody(BaseModel):
    flight_num: str | None = None
    seat_num: str | None = None
    ticket_class: str | None = Field(None, alias="class")

class AgentBookTicketBody(BookTicketBody):
    passenger_query: str | None = None

class FlightStatusBody(BaseModel):
    status: str | None = None

class IncidentBody(BaseModel):
    tail_number: str | None = None
    description: str | None = None

class CreateFlightBody(BaseModel):
    flight_num: str | None = None
    depart_time: str | None = None
    arrival_time: str | None = None
    origin: str | None = None
    destination: str | None = None
    status: str | None = None
    gate: str | None = None
    terminal: str | None = None
    tail_number: str | None = None
