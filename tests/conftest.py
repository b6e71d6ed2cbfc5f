"""
Shared fixtures: an in-memory SQLite database with foreign keys enforced and a
TestClient wired to it.
"""
import copy
import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

# Keep the app's module-level engine off the network during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import Base, enable_sqlite_foreign_keys, get_db
from crud.session_crud import create_session
from crud.user_crud import create_user
from main import app
from models.enums import UserRole
from schemas.session_schema import SessionCreate
from schemas.user_schema import UserCreate

VALID_ANSWERS = {
    "general": {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "age": 20,
        "gender": "Female",
        "race": "White",
        "ethnicity": "Not Hispanic or Latino",
    },
    "schooling": {
        "university": "Rice University",
        "universityOther": "",
        "major": "Computer Science",
        "levelOfStudy": "Junior",
    },
    "experience": {
        "numPrevHackathons": 2,
        "softwareExperience": "Intermediate",
    },
    "eventQuestions": {
        "heardFrom": "Friend",
        "shirtSize": "Medium",
        "dietaryRestrictions": ["Vegan", "Nuts"],
        "allergies": "",
        "accomodations": "",
    },
    "sponsorship": {
        "github": "https://github.com/ada",
        "linkedin": "",
        "personalSite": "",
        "companies": [],
    },
}


@pytest.fixture
def valid_answers() -> dict:
    return copy.deepcopy(VALID_ANSWERS)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


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
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Create a user with a live session; returns (user, bearer headers)."""

    def _make(role: UserRole = UserRole.NONE, email: str | None = None):
        user = create_user(db, UserCreate(email=email or f"{uuid4().hex}@example.com"), role=role)
        token = uuid4().hex
        create_session(
            db,
            SessionCreate(
                user_id=user.id,
                session_token=token,
                expires=datetime.now(timezone.utc) + timedelta(days=1),
            ),
        )
        return user, {"Authorization": f"Bearer {token}"}

    return _make
