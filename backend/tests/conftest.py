"""
Pytest configuration and fixtures
"""
import os
import sys
from pathlib import Path

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Settings are read on first import of the app; pin them for the test run
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE_ENABLED"] = "false"
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("PHONE_REGION", "ID")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import contact_app.models  # noqa: F401
from contact_app.core.database import Base

ALICE = {"name": "Alice", "email": "alice@example.com", "nohp": "081234567890"}
BOB = {"name": "Bob", "email": "bob@example.com", "nohp": "081298765432"}


@pytest.fixture(scope="function")
def engine():
    """In-memory SQLite engine shared by every connection of one test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(engine) -> Session:
    """Create a database session for testing"""
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(db: Session):
    """Create test client with database dependency override"""
    from contact_app.core.database import get_db
    from contact_app.main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def alice(db: Session):
    """Alice stored directly through the service"""
    from contact_app.services.contact_service import ContactService
    return ContactService(db).insert(dict(ALICE))
