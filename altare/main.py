### Description ###
# Altare Planner - Wedding Planning API
# - Main Application -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Altare Planner API - Main Application

FastAPI application entry point that provides:
- Planner accounts and seating chart endpoints
- Vendor temporary access and vendor profile endpoints
- Request logging and attribution
- OpenAPI documentation at /api/docs

Usage:
    # Development
    uvicorn altare.main:app --reload --port 8000

    # Production
    uvicorn altare.main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text

from altare.config import get_api_settings, get_project_root
from altare.database import SessionLocal, engine, init_db
from altare.middleware import RequestLoggingMiddleware
from altare.middleware.rate_limit import limiter, rate_limit_exceeded_handler
from altare.routers import admin_router, auth_router, seating_router, vendors_router
from altare.schemas.responses import ErrorDetail, ErrorResponse, HealthResponse
from altare.services import PersistenceClient, TableLayoutService
from altare.services.errors import (
    AccessDeniedError,
    ChairCreationError,
    NotFoundError,
    PersistenceError,
    ServiceError,
    ValidationError,
)
from altare.utils import setup_logger

# Load settings
settings = get_api_settings()

logger = setup_logger(
    "altare",
    level=settings.log_level,
    log_to_file=settings.log_to_file,
    log_to_console=settings.log_to_console,
)


def _check_pending_migrations():
    """
    Check for pending Alembic migrations on startup.

    Warns if the database schema is not up to date. Does not block startup.
    """
    from alembic.config import Config
    from alembic.runtime.migration import MigrationContext
    from alembic.script import ScriptDirectory

    alembic_ini = get_project_root() / "alembic.ini"
    if not alembic_ini.exists():
        return

    alembic_cfg = Config(str(alembic_ini))
    alembic_cfg.set_main_option("script_location", str(get_project_root() / "migrations"))
    script = ScriptDirectory.from_config(alembic_cfg)

    with engine.connect() as conn:
        current_rev = MigrationContext.configure(conn).get_current_revision()

    head_rev = script.get_current_head()

    if current_rev is None:
        print("\n" + "=" * 70)
        print("  DATABASE NOT STAMPED")
        print("=" * 70)
        print("\n  Tables were created from the models. To track migrations, run:")
        print("\n    alembic stamp head")
        print("=" * 70 + "\n")
    elif current_rev != head_rev:
        print("\n" + "=" * 70)
        print("  PENDING DATABASE MIGRATIONS")
        print("=" * 70)
        print(f"\n  Current version: {current_rev}")
        print(f"  Latest version:  {head_rev}")
        print("\n  Run migrations with:")
        print("\n    alembic upgrade head")
        print("=" * 70 + "\n")
    else:
        logger.info(f"Database schema is up to date (revision: {current_rev})")


async def _seed_templates():
    """Insert any missing predefined table templates"""
    db = SessionLocal()
    try:
        await TableLayoutService(PersistenceClient(db)).seed_predefined_templates()
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager

    Handles startup and shutdown events:
    - Startup: Create tables, check migrations, seed table templates
    - Shutdown: Log and exit
    """
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"API documentation available at: http://localhost:{settings.port}/api/docs")

    init_db()
    app.state.app_db_connected = True

    try:
        _check_pending_migrations()
    except Exception as e:
        # Startup continues; the schema was created from the models
        logger.warning(f"Could not check migrations: {e}")

    if settings.seed_templates_on_startup:
        await _seed_templates()

    yield

    logger.info("Shutting down Altare Planner API...")


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="""
## Altare Planner API

Backend for the wedding planner.

### Features
- **Accounts**: Planner registration and login
- **Seating**: Table templates, tables with generated chairs, guest seats
- **Vendors**: Admin-issued temporary vendor logins and vendor profile editing

### Authentication
Endpoints take a JWT in the `Authorization` header:

```
Authorization: Bearer <token>
```
    """,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# Add rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)


# ========================================
# Exception Handlers
# ========================================

def _error_response(request: Request, status_code: int, error: str, details: list[ErrorDetail] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=error,
            details=details,
            request_id=getattr(request.state, "request_id", None),
        ).model_dump(),
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        exc.message,
        [ErrorDetail(field=exc.field, message=exc.message, code="validation_error")],
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(request, status.HTTP_404_NOT_FOUND, exc.message)


@app.exception_handler(AccessDeniedError)
async def access_denied_error_handler(request: Request, exc: AccessDeniedError) -> JSONResponse:
    return _error_response(request, status.HTTP_401_UNAUTHORIZED, exc.message)


@app.exception_handler(ChairCreationError)
async def chair_creation_error_handler(request: Request, exc: ChairCreationError) -> JSONResponse:
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Database error",
        [
            ErrorDetail(
                message=exc.message,
                code="chair_creation_failed",
                context={"table_id": exc.table["id"]},
            )
        ],
    )


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Database error",
        [ErrorDetail(message=exc.message, code="persistence_error")],
    )


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return _error_response(request, status.HTTP_400_BAD_REQUEST, exc.message)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions"""
    logging.getLogger("altare").exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        [ErrorDetail(message=str(exc))] if settings.debug else None,
    )


# ========================================
# System Endpoints
# ========================================

@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["System"],
    summary="Health check",
    description="Check API health and database connectivity",
)
async def health_check() -> HealthResponse:
    """Health check endpoint"""
    app_db_connected = True
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Health check database error: {e}")
        app_db_connected = False

    return HealthResponse(
        status="healthy" if app_db_connected else "degraded",
        version=settings.api_version,
        app_db_connected=app_db_connected,
    )


@app.get("/", tags=["System"], summary="API Info")
async def root():
    """API root - returns basic API information"""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "docs": "/api/docs",
        "health": "/health",
    }


# Include routers
app.include_router(
    auth_router,
    prefix=f"{settings.api_prefix}/auth",
    tags=["Auth"],
)

app.include_router(
    admin_router,
    prefix=f"{settings.api_prefix}/admin",
    tags=["Admin - Vendors"],
)

app.include_router(
    vendors_router,
    prefix=f"{settings.api_prefix}/vendor",
    tags=["Vendor Portal"],
)

app.include_router(
    seating_router,
    prefix=f"{settings.api_prefix}/seating",
    tags=["Seating"],
)


# Entry point for running directly
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "altare.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
