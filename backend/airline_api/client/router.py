"""Route switching for the client.

The stored session decides which page may be shown: guests only see the
login page and a logged-in user is always sent to their role's home page.
"""
from airline_api.client.session_store import ClientSession

ROUTE_KEY = "airline_route"

LOGIN_ROUTE = "#/login"

ROUTES = (LOGIN_ROUTE, "#/passenger", "#/agent", "#/crew", "#/admin")

ROLE_TO_ROUTE = {
    "passenger": "#/passenger",
    "agent": "#/agent",
    "crew": "#/crew",
    "admin": "#/admin",
}


def normalize_route(route: str | None) -> str:
    return route if route in ROUTES else LOGIN_ROUTE


def resolve_route(requested: str | None, session: ClientSession) -> tuple[str, str | None]:
    """Return (route to render, status message or None)."""
    route = normalize_route(requested)
    if route == LOGIN_ROUTE:
        return route, None
    if not session.is_authenticated:
        return LOGIN_ROUTE, "Please log in first."
    expected = ROLE_TO_ROUTE.get(session.role)
    if expected and route != expected:
        return expected, f"Logged in as {session.role}. Redirected."
    return route, None


def home_route(role: str | None) -> str:
    return ROLE_TO_ROUTE.get((role or "").lower(), LOGIN_ROUTE)
