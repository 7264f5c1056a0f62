"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.database import Base, get_db
from src.main import app


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/pigeon_lofts", "/pigeon_lofts_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    from src import models  # noqa: F401

    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_user(client, email: str, password: str = "testpass123") -> AuthHeaders:
    """Register a user and return auth headers carrying the user's id."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": password},
    )
    assert response.status_code == 201
    data = response.json()
    token = data["access_token"]

    return AuthHeaders(
        {"Authorization": f"Bearer {token}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def register(client):
    """Return a helper that registers a user and returns their auth headers."""

    def _register(email: str, password: str = "testpass123") -> AuthHeaders:
        return register_user(client, email, password)

    return _register


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register_user(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """Create a second, unrelated user."""
    return register_user(client, "other@example.com")


@pytest.fixture
def make_loft(client):
    """Create a loft as the given user and return its JSON."""

    def _make_loft(headers, name: str = "Main Loft") -> dict:
        response = client.post("/api/v1/lofts", headers=headers, json={"name": name})
        assert response.status_code == 201
        return response.json()

    return _make_loft


@pytest.fixture
def make_bird(client):
    """Create a bird as the given user and return its JSON."""

    def _make_bird(headers, ring: str, name: str | None = None, loft_id: int | None = None) -> dict:
        response = client.post(
            "/api/v1/birds",
            headers=headers,
            json={"ring": ring, "name": name, "loft_id": loft_id},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make_bird
