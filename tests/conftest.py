"""
Pytest configuration and shared fixtures.

The project root is put on sys.path and the app is pointed at a throwaway
SQLite database before anything from the project is imported.
"""

import os
import shutil
import sys
import tempfile
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

_TEST_DB_DIR = tempfile.mkdtemp(prefix="mealtracker-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DB_DIR}/test.db"
os.environ["ENVIRONMENT"] = "testing"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DB_INIT_DELAY_SEC"] = "0"
os.environ["JWT_SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from domain.models import Base, SessionLocal, engine
from main import app


@pytest.fixture(scope="session", autouse=True)
def _test_database_dir():
    yield
    engine.dispose()
    shutil.rmtree(_TEST_DB_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_database():
    """Every test starts from an empty schema"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    """Session for arranging data and inspecting what requests persisted"""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
