import os

# Must be set before airline_api is imported: the engine is built at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV"] = "test"
os.environ["SECRET_KEY"] = "test-secret"
os.environ.pop("DEMO_USERS_JSON", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from airline_api.core.config import settings  # noqa: E402
from airline_api.core.users import UserRegistry  # noqa: E402
from airline_api.db.init_db import seed_demo_data  # noqa: E402
from airline_api.db.session import engine  # noqa: E402
from airline_api.main import app  # noqa: E402
from airline_api.models import Base  # noqa: E402

DEMO_PASSWORDS = {
    "passenger": "pass123",
    "agent": "agent123",
    "crew": "crew123",
    "admin": "admin123",
}

_demo_registry = None


def _fresh_registry() -> UserRegistry:
    # Hashing is slow, so the built-in users are hashed once and copied per test
    global _demo_registry
    if _demo_registry is None:
        _demo_registry = UserRegistry.from_settings(settings)
    return UserRegistry(_demo_registry.get(name) for name in DEMO_PASSWORDS)


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    seed_demo_data()
    app.state.user_registry = _fresh_registry()
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def login(client):
    def _login(username: str = "passenger", password: str | None = None) -> dict:
        r = client.post(
            "/auth/login",
            json={"username": username, "password": password or DEMO_PASSWORDS[username]},
        )
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['token']}"}
    return _login
