import datetime as dt
import os
import sys

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.db.base  # noqa: F401  registers every model
from app.db.base_class import Base
from app.models.student import Student
from app.models.teacher import Teacher


# In-memory SQLite, rebuilt for every test
@pytest.fixture
def engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def TestingSessionLocal(engine):
    """Create a session factory for the test database."""
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture
def override_get_db(TestingSessionLocal):
    """Override the database dependency to use our test database."""
    def _override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()
    return _override_get_db


@pytest.fixture
def db_session(TestingSessionLocal):
    """Create a database session for each test."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(override_get_db):
    """Create a test client for API tests."""
    from fastapi.testclient import TestClient
    from app.main import app
    from app.db import get_db

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def test_teacher(db_session):
    """Create a math teacher in the science department."""
    teacher = Teacher(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@x.com",
        subject="Math",
        department="Sci",
    )
    db_session.add(teacher)
    db_session.commit()
    db_session.refresh(teacher)
    return teacher


@pytest.fixture
def other_teacher(db_session):
    """Create a literature teacher in the humanities department."""
    teacher = Teacher(
        first_name="Jane",
        last_name="Austen",
        email="jane@x.com",
        subject="Literature",
        department="Humanities",
    )
    db_session.add(teacher)
    db_session.commit()
    db_session.refresh(teacher)
    return teacher


@pytest.fixture
def test_student(db_session):
    """Create a student without a teacher."""
    student = Student(
        student_id="S0001",
        first_name="Bob",
        last_name="Lee",
        email="bob@x.com",
        enrollment_date=dt.date(2024, 9, 1),
        grade_level="10",
    )
    db_session.add(student)
    db_session.commit()
    db_session.refresh(student)
    return student


@pytest.fixture
def make_student(db_session):
    """Factory for extra students: make_student("Ann", "Smith", teacher=t)."""
    counter = {"n": 0}

    def _make(first_name, last_name, *, teacher=None, grade_level=None,
              enrollment_date=dt.date(2024, 9, 1), student_id=None):
        counter["n"] += 1
        student = Student(
            student_id=student_id,
            first_name=first_name,
            last_name=last_name,
            email=f"{first_name.lower()}.{counter['n']}@x.com",
            enrollment_date=enrollment_date,
            grade_level=grade_level,
            teacher_id=teacher.id if teacher else None,
        )
        db_session.add(student)
        db_session.commit()
        db_session.refresh(student)
        return student

    return _make
