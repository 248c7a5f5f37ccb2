### Description ###
# Altare Planner - Wedding Planning API
# - App Database Setup -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
App Database Setup

SQLite database for storing:
- Planner accounts
- Vendors and their temporary access credentials
- Table templates, seating tables and chairs

Uses synchronous SQLAlchemy (no greenlet dependency).
"""

from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from altare.config import get_api_settings

DATABASE_URL = get_api_settings().database_url

# Make sure the folder of a file-based SQLite database exists
_url = make_url(DATABASE_URL)
if _url.drivername.startswith("sqlite") and _url.database not in (None, "", ":memory:"):
    Path(_url.database).parent.mkdir(parents=True, exist_ok=True)

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if _url.drivername.startswith("sqlite") else {},
    echo=False,  # Set True for SQL debugging
)


def enable_sqlite_foreign_keys(target_engine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless the pragma is on for every connection"""
    if not target_engine.url.drivername.startswith("sqlite"):
        return

    @event.listens_for(target_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency that provides a database session.

    Usage:
        @app.get("/endpoint")
        def endpoint(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize the database - create all tables.

    Call this on application startup.
    """
    # Import models to register them with Base
    from altare.models import seating, user, vendor, vendor_access  # noqa: F401

    Base.metadata.create_all(bind=engine)
    print(f"Database initialized at: {DATABASE_URL}")


def drop_db():
    """Drop all tables (use with caution!)"""
    Base.metadata.drop_all(bind=engine)
