"""Shared fixtures: in-memory database, users, tokens and a small question bank."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALGORITHM", "HS256")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from certprep.core.security import create_access_token
from certprep.db.base import get_db
from certprep.main import app
from certprep.models import Base, Certification, Question, User

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db():
    """Fresh schema per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _make_user(db, email, role="student"):
    user = User(email=email, username=email.split("@")[0], full_name=email, role=role, is_active=True)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def student(db):
    return _make_user(db, "alice@example.com")


@pytest.fixture
def other_student(db):
    return _make_user(db, "bob@example.com")


@pytest.fixture
def admin(db):
    return _make_user(db, "admin@example.com", role="admin")


def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(subject=str(user.id))}"}


@pytest.fixture
def student_headers(student):
    return auth_headers(student)


@pytest.fixture
def other_headers(other_student):
    return auth_headers(other_student)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def certifications(db):
    rows = [
        Certification(code="CAPM", name="Certified Associate in Project Management",
                      total_questions=46, exam_duration=180, passing_score=70, is_active=True),
        Certification(code="PSM1", name="Professional Scrum Master I",
                      total_questions=0, exam_duration=60, passing_score=85, is_active=True),
    ]
    db.add_all(rows)
    db.commit()
    return rows


def _question(external_id, topic, correct, certification="CAPM", difficulty="medium"):
    return Question(
        external_id=external_id,
        text=f"Question {external_id}",
        options={"A": "Alpha", "B": "Bravo", "C": "Charlie", "D": "Delta"},
        correct_answer=correct,
        explanation=f"Because {correct}",
        topic=topic,
        difficulty=difficulty,
        certification=certification,
    )


@pytest.fixture
def questions(db, certifications):
    """Three Risk questions (one multi-select), one Scope question, one PSM1 question."""
    rows = {
        "risk_single": _question("Q001", "Risk", "B"),
        "risk_multi": _question("Q002", "Risk", "A,C", difficulty="hard"),
        "risk_other": _question("Q003", "Risk", "D", difficulty="easy"),
        "scope": _question("Q004", "Scope", "A"),
        "scrum": _question("S001", "Events", "C", certification="PSM1"),
    }
    db.add_all(rows.values())
    db.commit()
    for row in rows.values():
        db.refresh(row)
    return rows
