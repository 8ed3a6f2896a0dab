import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

import heartkemy.models  # noqa: F401  (register all tables on Base.metadata)
from heartkemy.db.base import Base
from heartkemy.db.session import get_db
from heartkemy.main import app
from heartkemy.seed.seed_data import seed_db


# Use a SQLite file database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)


@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enforce foreign keys so link-table failures behave like PostgreSQL."""
    dbapi_conn.execute("PRAGMA foreign_keys=ON")


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DEMO_USER_1 = "user-demo-1"
DEMO_USER_2 = "user-demo-2"
DEMO_USER_3 = "user-demo-3"

SEOUL_CITY_HALL = (37.5665, 126.9780)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def seeded_db(db_session):
    """Create a database session with seeded data."""
    seed_db(db_session)
    return db_session


@pytest.fixture(scope="function")
def seeded_client(seeded_db):
    """Create a test client with seeded database."""
    def override_get_db():
        try:
            yield seeded_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def letter_payload():
    """Factory for a valid POST /api/letters body; keyword overrides use wire names."""
    def _payload(**overrides):
        body = {
            "fromUserId": DEMO_USER_1,
            "toUserId": DEMO_USER_2,
            "subject": "잘 지내나요?",
            "content": "오늘 문득 네 생각이 나서 짧은 편지를 띄워 보내요.",
            "fromLat": SEOUL_CITY_HALL[0],
            "fromLng": SEOUL_CITY_HALL[1],
            "toLat": 37.5765,
            "toLng": 126.9780,
            "emotionIds": ["emotion-warm-1"],
        }
        body.update(overrides)
        return body
    return _payload
