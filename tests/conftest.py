"""Pytest configuration and fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from tecnofit.config import get_settings
from tecnofit.db.models import Base, Exercise, Training, User, UserRole
from tecnofit.db.seed_data import make_exercise_data


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("DEFAULT_PER_PAGE", "15")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False, future=True)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Create a session factory bound to the test engine."""
    return sessionmaker(test_engine, class_=Session, expire_on_commit=False)


@pytest.fixture
def test_session(test_session_factory):
    """Provide a test database session that auto-commits."""
    session = test_session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def seeded_test_session(test_session):
    """Provide a test session with the demo users, trainings and exercises."""
    from tecnofit.db.seed_data import seed_demo_data

    seed_demo_data(test_session)
    return test_session


@pytest.fixture
def user_factory(test_session):
    """Create users directly, bypassing the fillable allow-list."""
    counter = {"n": 0}

    def create(role: str = UserRole.CUSTOMER.value, **overrides) -> User:
        counter["n"] += 1
        data = {
            "name": f"User {counter['n']}",
            "email": f"user{counter['n']}@tecnofit.test",
            "role": role,
        }
        data.update(overrides)
        user = User(**data)
        test_session.add(user)
        test_session.flush()
        return user

    return create


@pytest.fixture
def training_factory(test_session):
    """Create trainings."""

    def create(name: str = "Full Body", **overrides) -> Training:
        training = Training(name=name, **overrides)
        test_session.add(training)
        test_session.flush()
        return training

    return create


@pytest.fixture
def exercise_factory(test_session):
    """Create exercises with random but valid attributes."""

    def create(training_id: int | None = None, **overrides) -> Exercise:
        exercise = Exercise(**make_exercise_data(training_id, **overrides))
        test_session.add(exercise)
        test_session.flush()
        return exercise

    return create
