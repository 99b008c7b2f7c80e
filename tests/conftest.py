"""Pytest configuration and fixtures."""

import os

# Required settings must exist before the application modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("PORT", "4000")
os.environ.setdefault("ENVIRONMENT", "test")

from unittest.mock import patch  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src.api.rate_limit import auth_rate_limiter  # noqa: E402
from src.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from src.main import app  # noqa: E402
from src.services.search_history import SearchHistoryService  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the user's identity."""

    def __init__(self, *args, user_id: int | None = None, username=None, email=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.environ["DATABASE_URL"].startswith("postgresql"):
    # Running in Docker - use a dedicated PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"].rsplit("/", 1)[0] + "/pokedex_test"
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
event.listen(engine, "connect", enable_sqlite_foreign_keys)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    from src import models  # noqa: F401

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


@pytest.fixture(scope="function", autouse=True)
def reset_rate_limiter():
    """Every test starts with a fresh auth rate limit budget."""
    auth_rate_limiter.reset()
    yield
    auth_rate_limiter.reset()


@pytest.fixture(scope="function", autouse=True)
def history_trim_task(db):
    """Run queued history trims inline against the test session instead of Celery."""

    def run_inline(user_id: int):
        return SearchHistoryService(db).trim_history(user_id)

    with patch(
        "src.tasks.search_history.trim_search_history.delay", side_effect=run_inline
    ) as mock_delay:
        yield mock_delay


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


def register_and_login(client, username: str, email: str, password: str = "secret123"):
    """Create a user and return auth headers with user info."""
    response = client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201

    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    data = response.json()["data"]

    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        username=username,
        email=email,
    )


@pytest.fixture
def auth_headers(client):
    """Auth headers for a primary test user."""
    return register_and_login(client, "ash", "ash@example.com")


@pytest.fixture
def other_auth_headers(client):
    """Auth headers for a second, unrelated user."""
    return register_and_login(client, "misty", "misty@example.com")
