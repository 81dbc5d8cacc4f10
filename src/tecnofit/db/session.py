"""Database session management for SQLAlchemy."""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from tecnofit.config import get_settings
from tecnofit.db.models import Base

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine(
            settings.database_url,
            echo=settings.database_echo,
            future=True,
        )
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Get or create the session factory."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_factory


def reset_engine() -> None:
    """Dispose the cached engine so the next call picks up fresh settings."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Get a database session as a context manager.

    Commits when the block exits cleanly, rolls back and re-raises otherwise.
    Repositories only flush; this is the transaction boundary.
    """
    factory = get_session_factory()
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def create_tables() -> None:
    """Create all database tables."""
    Base.metadata.create_all(get_engine())


def init_db(seed: bool = False) -> None:
    """Initialize the database with tables and, optionally, demo data."""
    create_tables()
    if seed:
        from tecnofit.db.seed_data import seed_demo_data

        with get_session() as session:
            seed_demo_data(session)
