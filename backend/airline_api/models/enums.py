from enum import Enum


class Role(str, Enum):
    passenger = "passenger"
    agent = "agent"
    crew = "crew"
    admin = "admin"


# Roles a caller may pick for themselves on /auth/register
SELF_REGISTER_ROLES = (Role.passenger, Role.agent, Role.crew)


class FlightStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    BOARDING = "BOARDING"
    DELAYED = "DELAYED"
    IN_AIR = "IN_AIR"
    LANDED = "LANDED"
    CANCELLED = "CANCELLED"


class TicketClass(str, Enum):
    ECONOMY = "ECONOMY"
    BUSINESS = "BUSINESS"
    FIRST = "FIRST"


class TicketStatus(str, Enum):
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"


def parse_enum(enum_cls, value):
    """Map free text onto a member ignoring case and surrounding blanks; None when nothing matches."""
    text = str(value or "").strip()
    if not text:
        return None
    candidates = (text, text.upper(), text.lower())
    for candidate in candidates:
        try:
            return enum_cls(candidate)
        except ValueError:
            continue
    return None
