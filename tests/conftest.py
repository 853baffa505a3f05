import pytest
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["API_PREFIX"] = ""

from jobportal.database import Base, get_db
from jobportal.main import app
from jobportal.core.config import settings
from jobportal.core.limiter import limiter
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

limiter.enabled = False

@pytest.fixture(scope="function")
def engine():
    """A fresh in-memory store per test; StaticPool keeps the one connection alive."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="function")
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()

@pytest.fixture(scope="function")
def client(session_factory):
    """Get a TestClient whose requests each get their own session on the test store."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture(scope="function")
def get_token():
    """Helper fixture to sign session tokens for an identity claim."""
    from jobportal.services.auth import create_session_token

    def _get_token(email, **claims):
        return create_session_token({"email": email, **claims})
    return _get_token

@pytest.fixture(scope="function")
def login(client, get_token):
    """Put a session cookie for ``email`` on the test client."""
    def _login(email, **claims):
        client.cookies.set(settings.cookie_name, get_token(email, **claims))
        return client
    return _login

@pytest.fixture(scope="function")
def create_job(client):
    def _create_job(**fields):
        payload = {"title": "Engineer", "hr_email": "hr@x.com", **fields}
        response = client.post("/jobs", json=payload)
        assert response.status_code == 200
        return response.json()["insertedId"]
    return _create_job
