"""Database engine, session factory, and base model."""
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from config import DATABASE_URL

logger = logging.getLogger(__name__)

engine = create_engine(DATABASE_URL, echo=False)
SessionLocal = sessionmaker(bind=engine)


class Base(DeclarativeBase):
    pass


@contextmanager
def with_db(session_factory=None):
    """Context manager that yields a DB session and auto-closes it.

    Usage::

        with with_db() as db:
            row = db.get(Preference, "darkMode")
        # session is closed automatically, even on exception
    """
    session = (session_factory or SessionLocal)()
    try:
        yield session
    finally:
        session.close()


def init_db(bind=None):
    """Create all tables defined by Base subclasses."""
    # Import all models so they register with Base.metadata
    import src.models.preference  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.debug("Database tables ready")
