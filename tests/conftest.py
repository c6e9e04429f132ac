import os
from pathlib import Path

TEST_DB_FILE = "test_classwork.db"
TEST_DB_URL = f"sqlite:///./{TEST_DB_FILE}"
TEST_DATA_DIR = Path(__file__).resolve().parent / "data"

# must be set before the app modules read their config
os.environ["CLASSWORK_DATABASE_URL"] = TEST_DB_URL
os.environ["CLASSWORK_SEED_DIR"] = str(TEST_DATA_DIR)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from app.core.deps import get_db  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.init_db import seed_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models.classwork import ClassworkRecord  # noqa: E402
from app.models.course import Course, CourseCategory  # noqa: E402
from app.models.grading_period import GradingPeriod  # noqa: E402
from app.repositories.json_store import (  # noqa: E402
    JsonClassworkStore,
    JsonCourseLookup,
    JsonGradingPeriods,
)
from app.services.classwork import ClassworkService  # noqa: E402

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """Create a fresh schema once for the whole test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    if os.path.exists(TEST_DB_FILE):
        os.remove(TEST_DB_FILE)


@pytest.fixture(autouse=True)
def seed_data():
    """Reload the JSON fixtures into clean tables for each test."""
    db = TestingSessionLocal()
    try:
        # Clear tables (child -> parent)
        db.query(ClassworkRecord).delete()
        db.query(GradingPeriod).delete()
        db.query(CourseCategory).delete()
        db.query(Course).delete()
        db.commit()

        seed_db(db, TEST_DATA_DIR)

        yield
    finally:
        db.close()


@pytest.fixture()
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    """Test client that uses the test DB session via dependency override."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def service():
    """Service over the JSON fixtures, no database involved."""
    return ClassworkService(
        store=JsonClassworkStore.from_file(TEST_DATA_DIR / "classwork.json"),
        courses=JsonCourseLookup.from_file(TEST_DATA_DIR / "courses.json"),
        periods=JsonGradingPeriods.from_file(TEST_DATA_DIR / "grading_periods.json"),
    )
