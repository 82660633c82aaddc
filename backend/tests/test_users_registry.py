import json

import pytest

from airline_api.core.config import Settings
from airline_api.core.users import UserRegistry, UsernameTaken
from airline_api.models.enums import Role


def test_defaults_when_no_json():
    registry = UserRegistry.from_settings(Settings(DEMO_USERS_JSON=None, DEMO_CREW_ID="E42"))
    assert len(registry) == 4
    crew = registry.get("crew")
    assert crew.role is Role.crew
    assert crew.employee_id == "E42"
    assert crew.hashed_password != "crew123"
    assert registry.authenticate("crew", "crew123") is crew
    assert registry.authenticate("crew", "wrong") is None
    assert registry.authenticate("nobody", "crew123") is None


def test_json_replaces_defaults_and_skips_bad_entries():
    raw = json.dumps({
        "ops": {"password": "ops1", "role": "ADMIN", "name": "Ops Desk", "employee_id": "A1"},
        "ghost": {"password": "x", "role": "pilot"},
        "nopass": {"role": "agent"},
        "junk": "not-an-object",
    })
    registry = UserRegistry.from_settings(Settings(DEMO_USERS_JSON=raw))
    assert len(registry) == 1
    assert "passenger" not in registry
    ops = registry.authenticate("ops", "ops1")
    assert ops.role is Role.admin
    assert ops.token_claims() == {"ssn": "", "employee_id": "A1", "name": "Ops Desk", "email": ""}


def test_malformed_json_falls_back_to_defaults():
    registry = UserRegistry.from_settings(Settings(DEMO_USERS_JSON="{broken"))
    assert "admin" in registry
    assert len(registry) == 4


def test_register_rejects_taken_username():
    registry = UserRegistry()
    registry.register("kim", "pw", name="Kim", email="kim@example.com", role=Role.crew)
    with pytest.raises(UsernameTaken):
        registry.register("kim", "other", name="Kim 2", email="kim2@example.com", role=Role.agent)
    assert registry.authenticate("kim", "pw").name == "Kim"


def test_registries_are_independent():
    a, b = UserRegistry(), UserRegistry()
    a.register("solo", "pw", name="Solo", email="solo@example.com", role=Role.passenger)
    assert "solo" in a
    assert "solo" not in b
