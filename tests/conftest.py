"""
Shared fixtures: an in-memory SQLite store per test, no simulated latency,
and a TestClient wired to the same store.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hotelquick.core.config import settings
from hotelquick.db.session import Base, get_db
from hotelquick.models.kv_entry import KVEntry  # noqa: F401
from hotelquick.main import app


@pytest.fixture(autouse=True)
def no_latency(monkeypatch):
    monkeypatch.setattr(settings, "LATENCY_FACTOR", 0.0)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def as_consumer(client):
    r = client.post("/api/v1/auth/login", json={"email": "consumer@example.com", "password": "password123", "role": "consumer"})
    assert r.status_code == 200
    return client


@pytest.fixture
def as_provider(client):
    r = client.post("/api/v1/auth/login", json={"email": "provider@example.com", "password": "password123", "role": "provider"})
    assert r.status_code == 200
    return client


@pytest.fixture
def hotel_payload():
    return {
        "name": "Alila Villas Uluwatu",
        "description": "Clifftop villas with private pools above the Indian Ocean.",
        "address": "Jl. Belimbing Sari, Uluwatu, Bali",
        "price": 4100000,
        "image": "https://images.example.com/alila.jpg",
        "rooms": 84,
        "amenities": "Free WiFi, Air conditioning",
    }
