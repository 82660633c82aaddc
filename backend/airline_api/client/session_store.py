"""Login session for the client, kept under fixed keys in a state mapping.

In the Streamlit app the mapping is ``st.session_state``; anything with
``get``/``__setitem__``/``pop`` works, so plain dicts are fine elsewhere.
"""
from typing import Any, MutableMapping, Optional

from pydantic import BaseModel

AUTH_KEYS = {
    "token": "airline_token",
    "role": "airline_role",
    "name": "airline_name",
    "email": "airline_email",
}


class ClientSession(BaseModel):
    token: str = ""
    role: str = ""
    name: str = ""
    email: str = ""

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token and self.role)


class SessionStore:
    def __init__(self, state: Optional[MutableMapping[str, Any]] = None):
        self.state = state if state is not None else {}

    def load(self) -> ClientSession:
        return ClientSession(
            token=str(self.state.get(AUTH_KEYS["token"]) or ""),
            role=str(self.state.get(AUTH_KEYS["role"]) or "").lower(),
            name=str(self.state.get(AUTH_KEYS["name"]) or ""),
            email=str(self.state.get(AUTH_KEYS["email"]) or ""),
        )

    def save(self, session: ClientSession) -> None:
        self.state[AUTH_KEYS["token"]] = session.token or ""
        self.state[AUTH_KEYS["role"]] = (session.role or "").lower()
        self.state[AUTH_KEYS["name"]] = session.name or ""
        self.state[AUTH_KEYS["email"]] = session.email or ""

    def clear(self) -> None:
        for key in AUTH_KEYS.values():
            self.state.pop(key, None)
