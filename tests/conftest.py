import sys
from pathlib import Path as _Path
sys.path.insert(0, str(_Path(__file__).resolve().parents[1] / "src"))

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from adaquote.app import create_app
from adaquote.config import Settings


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Test settings backed by a fresh SQLite file in a temporary directory."""
    return Settings(
        env="test",
        database_path=str(tmp_path / "adaquote_test.db"),
        secret_key="test-secret",
        log_level="WARNING",
    )


@pytest.fixture()
def client(settings: Settings):
    # Entering the context runs the lifespan, which creates the schema.
    with TestClient(create_app(settings)) as c:
        yield c


def register(client: TestClient, username: str = "ada", password: str = "lovelace-1815", **extra):
    data = {
        "username": username,
        "password": password,
        "first_name": extra.get("first_name", "Ada"),
        "last_name": extra.get("last_name", "Lovelace"),
        "email": extra.get("email", "ada@example.org"),
    }
    return client.post("/auth/register", data=data, follow_redirects=False)


@pytest.fixture()
def logged_in_client(client: TestClient) -> TestClient:
    r = register(client)
    assert r.status_code == 303
    return client
