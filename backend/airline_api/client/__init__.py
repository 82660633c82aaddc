from airline_api.client.gateway import ApiRequestError, Gateway
from airline_api.client.router import resolve_route
from airline_api.client.session_store import ClientSession, SessionStore

__all__ = ["ApiRequestError", "Gateway", "resolve_route", "ClientSession", "SessionStore"]
