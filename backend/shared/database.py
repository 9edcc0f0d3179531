"""
Database engine factory and store error classification.

The engine is created once at application startup (see api/dependencies.py)
and passed explicitly to every repository. Nothing in this module caches it.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.pool import StaticPool

from .config import Settings
from .tables import metadata

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE codes surfaced by psycopg2 as ``pgcode``
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.

    SQLite engines get foreign key enforcement switched on, and in-memory
    SQLite databases share a single connection so every session sees the
    same data.

    Args:
        url: SQLAlchemy database URL
        echo: Log every statement (debugging only)

    Returns:
        Configured Engine
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)
        _enable_sqlite_foreign_keys(engine)
        return engine

    return create_engine(url, echo=echo, pool_pre_ping=True)


def create_engine_from_settings(settings: Settings) -> Engine:
    """Create the engine described by the application settings."""
    return create_db_engine(settings.database_url, echo=settings.database_echo)


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_schema(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    metadata.create_all(engine)


def check_connection(engine: Engine) -> bool:
    """Return True if the store answers a trivial query."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.warning(f"Database readiness check failed: {e}")
        return False


def classify_integrity_error(exc: IntegrityError) -> Optional[str]:
    """
    Map an IntegrityError to its SQLSTATE code.

    psycopg2 exposes the code directly. SQLite only reports it through the
    message text, so that is matched as a fallback.

    Returns:
        UNIQUE_VIOLATION, FOREIGN_KEY_VIOLATION, another SQLSTATE, or None
    """
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code:
        return code

    message = str(orig).upper()
    if "UNIQUE CONSTRAINT FAILED" in message:
        return UNIQUE_VIOLATION
    if "FOREIGN KEY CONSTRAINT FAILED" in message:
        return FOREIGN_KEY_VIOLATION
    return None
