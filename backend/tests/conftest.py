"""Pytest fixtures — per-test SQLite database and a fake Weatherstack upstream."""
import httpx
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from app.config import settings
from app.database import Base, get_db
from app.dependencies import get_weather_provider
from app.main import app
from app.providers.weatherstack import WeatherstackClient

# Import all models so they register with Base.metadata
from app.models.user import User                   # noqa: F401
from app.models.weather import WeatherReading      # noqa: F401


def weatherstack_payload(name: str, temperature: float, description: str, humidity: float) -> dict:
    """Minimal Weatherstack ``current`` response body."""
    return {
        "request": {"type": "City", "query": name, "language": "en", "unit": "m"},
        "location": {"name": name, "country": "Somewhere"},
        "current": {
            "temperature": temperature,
            "weather_descriptions": [description],
            "humidity": humidity,
        },
    }


def weatherstack_error(info: str, code: int = 615) -> dict:
    return {"success": False, "error": {"code": code, "type": "request_failed", "info": info}}


class FakeWeatherstack:
    """Upstream stand-in served through ``httpx.MockTransport``.

    Unknown cities get Weatherstack's own error payload.
    """

    def __init__(self):
        self.payloads: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []
        self.transport_error: Exception | None = None
        self.status_code = 200

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.transport_error is not None:
            raise self.transport_error
        city = request.url.params.get("query")
        payload = self.payloads.get(city) or weatherstack_error(
            "Your API request failed. Please try again or contact support."
        )
        return httpx.Response(self.status_code, json=payload)

    def client(self) -> WeatherstackClient:
        return WeatherstackClient(
            api_key="test-key",
            base_url="http://weatherstack.test/current",
            client=httpx.Client(transport=httpx.MockTransport(self.handler)),
        )


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Minimum bcrypt cost so registration tests stay fast."""
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture(scope="function")
def db_engine(tmp_path):
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session bound to the test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def weatherstack():
    fake = FakeWeatherstack()
    fake.payloads["London"] = weatherstack_payload("London", 15, "Partly cloudy", 70)
    return fake


@pytest.fixture(scope="function")
def client(db_engine, weatherstack):
    """TestClient with the database and the weather provider overridden."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_weather_provider] = weatherstack.client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def register_user(client: TestClient, username: str = "testuser", password: str = "password123") -> str:
    """Helper — POST /api/auth/register and return the token."""
    resp = client.post("/api/auth/register", json={"username": username, "password": password})
    assert resp.status_code == 201, resp.text
    return resp.json()["token"]


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
