"""Pytest configuration and fixtures."""
import pytest
from sqlalchemy.orm import sessionmaker
from app.backend.db.models import Base
from app.backend.db.session import build_engine, get_db
from app.backend.main import app
from fastapi.testclient import TestClient
import tempfile
import os


@pytest.fixture(scope="function")
def db_session():
    """Create a test database session."""
    # Create temporary SQLite database
    db_fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(db_fd)

    engine = build_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
        os.unlink(db_path)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_user_data():
    """Sample sign-up data for testing."""
    return {
        "email": "ana@example.com",
        "password": "s3cret-pass",
        "display_name": "Ana Souza"
    }


@pytest.fixture
def signed_in(client, sample_user_data):
    """Register a user and return (user_id, auth headers)."""
    response = client.post("/api/auth/signup", json=sample_user_data)
    assert response.status_code == 201
    data = response.json()
    return data["user"]["id"], {"Authorization": f"Bearer {data['access_token']}"}


@pytest.fixture
def sample_event_data():
    """Sample event data for testing."""
    return {
        "title": "React Meetup São Paulo",
        "description": "Hooks, server components and pizza",
        "date": "2030-06-01T19:00:00+00:00",
        "location": "Av. Paulista, 1000 - São Paulo/SP",
        "max_attendees": 50,
        "organizer_name": "Ana Souza",
        "organizer_email": "ana@example.com",
        "image_url": "https://example.com/react.png",
        "tags": ["React", "Frontend"]
    }
