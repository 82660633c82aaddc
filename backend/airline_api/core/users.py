"""Credential registry used by /auth/login and /auth/register.

Users live in memory only. The registry is built from settings at startup and
attached to ``app.state``; handlers receive it through ``get_user_registry``.
"""
import json
import logging
import threading
from typing import Any, Iterable, Optional

from pydantic import BaseModel

from airline_api.core.config import Settings
from airline_api.core.security import get_password_hash, verify_password
from airline_api.models.enums import Role, parse_enum

logger = logging.getLogger(__name__)


class UsernameTaken(ValueError):
    pass


class RegisteredUser(BaseModel):
    username: str
    hashed_password: str
    role: Role
    name: str
    email: str = ""
    ssn: str = ""
    employee_id: str = ""

    def token_claims(self) -> dict[str, Any]:
        return {
            "ssn": self.ssn,
            "employee_id": self.employee_id,
            "name": self.name or self.username,
            "email": self.email,
        }


def _default_users(cfg: Settings) -> dict[str, dict[str, Any]]:
    return {
        "passenger": {
            "password": "pass123",
            "role": "passenger",
            "ssn": cfg.demo_passenger_ssn,
            "email": cfg.demo_passenger_email,
            "name": "Passenger User",
        },
        "agent": {"password": "agent123", "role": "agent", "employee_id": cfg.demo_agent_id, "name": "Agent User"},
        "crew": {"password": "crew123", "role": "crew", "employee_id": cfg.demo_crew_id, "name": "Crew User"},
        "admin": {"password": "admin123", "role": "admin", "employee_id": cfg.demo_admin_id, "name": "Admin User"},
    }


def _load_raw_users(cfg: Settings) -> dict[str, dict[str, Any]]:
    if cfg.demo_users_json:
        try:
            parsed = json.loads(cfg.demo_users_json)
            if isinstance(parsed, dict):
                return parsed
            logger.warning("DEMO_USERS_JSON is not a JSON object, falling back to defaults")
        except json.JSONDecodeError as e:
            logger.warning("Failed to parse DEMO_USERS_JSON (%s), falling back to defaults", e)
    return _default_users(cfg)


class UserRegistry:
    def __init__(self, users: Iterable[RegisteredUser] = ()):
        self._users: dict[str, RegisteredUser] = {u.username: u for u in users}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, cfg: Settings) -> "UserRegistry":
        users = []
        for username, entry in _load_raw_users(cfg).items():
            if not isinstance(entry, dict):
                logger.warning("Skipping demo user %r: entry is not an object", username)
                continue
            role = parse_enum(Role, entry.get("role"))
            password = str(entry.get("password") or "")
            if role is None or not password:
                logger.warning("Skipping demo user %r: missing password or unknown role", username)
                continue
            users.append(
                RegisteredUser(
                    username=username,
                    hashed_password=get_password_hash(password),
                    role=role,
                    name=str(entry.get("name") or username),
                    email=str(entry.get("email") or ""),
                    ssn=str(entry.get("ssn") or ""),
                    employee_id=str(entry.get("employee_id") or ""),
                )
            )
        logger.info("Loaded %d demo users", len(users))
        return cls(users)

    def __contains__(self, username: str) -> bool:
        return username in self._users

    def __len__(self) -> int:
        return len(self._users)

    def get(self, username: str) -> Optional[RegisteredUser]:
        return self._users.get(username)

    def authenticate(self, username: str, password: str) -> Optional[RegisteredUser]:
        user = self._users.get(username)
        if not user or not verify_password(password, user.hashed_password):
            return None
        return user

    def register(self, username: str, password: str, name: str, email: str, role: Role) -> RegisteredUser:
        user = RegisteredUser(
            username=username,
            hashed_password=get_password_hash(password),
            role=role,
            name=name,
            email=email,
        )
        with self._lock:
            if username in self._users:
                raise UsernameTaken(username)
            self._users[username] = user
        return user
