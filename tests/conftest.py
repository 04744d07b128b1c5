import os

# Cheap bcrypt work factor for the whole test run; must be set before settings load
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import uuid
from datetime import timedelta
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.core.auth import CurrentUser, hash_password
from app.core.config import settings
from app.core.database import Base, get_db, utcnow
from app.main import app as fastapi_app
from app.models.auth import User, UserSession
from app.models.quiz import Question, QuestionSet


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()


# ============================================================================
# Data factories
# ============================================================================


@pytest.fixture
def make_user(db_session):
    def _make_user(username: str = "quizuser", password: str = "secret123") -> User:
        user = User(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=hash_password(password),
        )
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user


@pytest.fixture
def make_session(db_session):
    def _make_session(user: User, expires_in: Optional[timedelta] = None) -> str:
        session_id = uuid.uuid4().hex
        if expires_in is None:
            expires_in = timedelta(days=settings.SESSION_TTL_DAYS)
        db_session.add(
            UserSession(id=session_id, user_id=user.id, expires_at=utcnow() + expires_in)
        )
        db_session.commit()
        return session_id

    return _make_session


@pytest.fixture
def login_as(client, make_session):
    """Put a valid session cookie for the user on the test client"""

    def _login_as(user: User) -> str:
        session_id = make_session(user)
        client.cookies.set(settings.SESSION_COOKIE_NAME, session_id)
        return session_id

    return _login_as


@pytest.fixture
def current_user():
    def _current_user(user: User) -> CurrentUser:
        return CurrentUser(id=user.id, username=user.username, session_id="service-test")

    return _current_user


@pytest.fixture
def make_question_set(db_session):
    def _make_question_set(
        name: str = "Math Basics",
        description: Optional[str] = "Basic arithmetic questions",
        level: int = 0,
    ) -> QuestionSet:
        question_set = QuestionSet(
            id=str(uuid.uuid4()), name=name, description=description, level=level
        )
        db_session.add(question_set)
        db_session.commit()
        return question_set

    return _make_question_set


@pytest.fixture
def make_question(db_session):
    def _make_question(
        question_set: QuestionSet,
        content: str,
        question_type: str,
        correct_answer: str,
        options: Optional[List[str]] = None,
    ) -> Question:
        question = Question(
            id=str(uuid.uuid4()),
            question_set_id=question_set.id,
            type=question_type,
            content=content,
            options=options,
            correct_answer=correct_answer,
        )
        db_session.add(question)
        db_session.commit()
        return question

    return _make_question


@pytest.fixture
def math_set(make_question_set, make_question):
    """A set with one true/false and one single-selection question"""
    question_set = make_question_set()
    true_false = make_question(question_set, "2 + 2 = 4?", "true_false", "true")
    single = make_question(
        question_set, "What is 10 / 2?", "single_selection", "5", ["2", "5", "8", "10"]
    )
    return question_set, true_false, single
