import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from kanban.config import settings
from kanban.errors import StorageFault

logger = logging.getLogger(__name__)

# Default to a local SQLite database if no DATABASE_URL is provided or usable
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(BASE_DIR, ".."))
DEFAULT_DB_PATH = os.path.join(PROJECT_ROOT, "kanban.db")


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores ON DELETE clauses unless foreign keys are switched on per connection."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _build_engine():
    """Create the SQLAlchemy engine, preferring the configured DATABASE_URL."""
    database_url = settings.DATABASE_URL

    if database_url:
        try:
            return create_engine(database_url, pool_pre_ping=True)
        except ModuleNotFoundError as exc:
            # The SQL driver (e.g. psycopg2) is missing in this environment.
            logger.warning("Driver for DATABASE_URL unavailable (%s); falling back to SQLite", exc)

    sqlite_url = f"sqlite:///{DEFAULT_DB_PATH}"
    return create_engine(sqlite_url, connect_args={"check_same_thread": False})


engine = _build_engine()

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for the models
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Run a unit of work: commit on success, roll back on any failure.

    Storage-layer errors surface as ``StorageFault``; domain errors raised
    inside the block propagate unchanged after the rollback.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Transaction rolled back after storage error: %s", exc)
        raise StorageFault("The change could not be saved, please retry") from exc
    except Exception:
        db.rollback()
        raise
