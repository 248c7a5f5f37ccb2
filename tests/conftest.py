"""
Shared pytest fixtures for Altare Planner API tests.

Provides:
- Isolated file-based SQLite database per test
- FastAPI TestClient with dependency overrides
- Authentication fixtures (planner, admin and vendor tokens)
- Persistence client and services bound to the test database
"""

import os
import tempfile
from datetime import timedelta
from pathlib import Path
from typing import Generator

# Point settings at a throwaway config/database before altare is imported
_TEST_HOME = Path(tempfile.mkdtemp(prefix="altare-tests-"))
os.environ.setdefault("ALTARE_CONFIG_PATH", str(_TEST_HOME / "config.yaml"))
os.environ.setdefault("ALTARE_DATABASE_URL", f"sqlite:///{_TEST_HOME / 'app.db'}")
os.environ.setdefault("ALTARE_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALTARE_LOG_TO_FILE", "false")
os.environ.setdefault("ALTARE_LOG_TO_CONSOLE", "false")
os.environ.setdefault("ALTARE_SEED_TEMPLATES_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from altare.database import Base, enable_sqlite_foreign_keys, get_db
from altare.main import app
from altare.middleware.auth import TOKEN_TYPE_ADMIN, TOKEN_TYPE_USER, TOKEN_TYPE_VENDOR, create_access_token
from altare.middleware.rate_limit import limiter
from altare.models import TableTemplate, User, Vendor
from altare.services import PersistenceClient, TableLayoutService, VendorAccessService

from tests.fixtures.factories import create_template, create_user, create_vendor


# ============================================
# Database Fixtures
# ============================================


@pytest.fixture(scope="function")
def test_engine(tmp_path):
    """
    Create an isolated SQLite database engine for each test.

    Uses a file-based database in tmp_path to avoid connection isolation
    issues with in-memory SQLite.
    """
    db_path = tmp_path / "test.db"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    return engine


@pytest.fixture(scope="function")
def test_db(test_engine) -> Generator[Session, None, None]:
    """
    Create database tables and provide a session.

    Tables are created before and dropped after.
    """
    # Register all models with Base.metadata
    from altare.models import seating, user, vendor, vendor_access  # noqa: F401

    Base.metadata.create_all(bind=test_engine)

    TestingSessionLocal = sessionmaker(bind=test_engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate limit counters."""
    limiter.reset()
    yield


@pytest.fixture(scope="function")
def client(test_db: Session) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient with database dependency overridden.

    Uses the test_db session instead of the app database.
    """

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================
# Service Fixtures
# ============================================


@pytest.fixture
def persistence(test_db: Session, test_user: User) -> PersistenceClient:
    """Persistence client acting as the test planner."""
    return PersistenceClient(test_db, actor_id=test_user.id)


@pytest.fixture
def vendor_access_service(persistence: PersistenceClient) -> VendorAccessService:
    return VendorAccessService(persistence)


@pytest.fixture
def table_layout_service(persistence: PersistenceClient) -> TableLayoutService:
    return TableLayoutService(persistence)


# ============================================
# Record Fixtures
# ============================================


@pytest.fixture
def test_user(test_db: Session) -> User:
    """Create a planner account."""
    return create_user(db=test_db)


@pytest.fixture
def other_user(test_db: Session) -> User:
    """Create a second planner account (for ownership checks)."""
    return create_user(db=test_db, email="other@example.com", display_name="Other Planner")


@pytest.fixture
def test_vendor(test_db: Session) -> Vendor:
    """Create a vendor profile."""
    return create_vendor(db=test_db)


@pytest.fixture
def round_template(test_db: Session) -> TableTemplate:
    """Predefined 8-seat round template."""
    return create_template(db=test_db)


@pytest.fixture
def rectangular_template(test_db: Session) -> TableTemplate:
    """Predefined 8-seat rectangular template."""
    return create_template(
        db=test_db,
        name="Rectangular Table (8)",
        shape="rectangular",
        width=120,
        length=200,
        seats=8,
    )


# ============================================
# Authentication Fixtures
# ============================================


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(test_user: User) -> dict[str, str]:
    """
    HTTP headers with a planner token.

    Usage:
        def test_endpoint(client, user_headers):
            response = client.get("/api/v1/seating/tables", headers=user_headers)
    """
    return bearer(create_access_token(test_user.id, TOKEN_TYPE_USER, timedelta(hours=1)))


@pytest.fixture
def other_user_headers(other_user: User) -> dict[str, str]:
    return bearer(create_access_token(other_user.id, TOKEN_TYPE_USER, timedelta(hours=1)))


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """HTTP headers with an admin token."""
    return bearer(create_access_token("admin", TOKEN_TYPE_ADMIN, timedelta(hours=1)))


@pytest.fixture
def vendor_headers(test_vendor: Vendor) -> dict[str, str]:
    """HTTP headers with a vendor session for test_vendor."""
    return bearer(create_access_token(test_vendor.id, TOKEN_TYPE_VENDOR, timedelta(hours=1)))
