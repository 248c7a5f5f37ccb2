### Description ###
# Altare Planner - Wedding Planning API
# - Rate Limiting Middleware -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Rate Limiting Middleware

Per-client rate limiting using slowapi. Applied to account login and
registration and to table creation. Vendor login is not limited.
"""

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

# Limits used by the routers
AUTH_RATE_LIMIT = "10/minute"
TABLE_CREATE_RATE_LIMIT = "60/minute"


def get_client_identifier(request: Request) -> str:
    """Rate limit identifier: the client address"""
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=get_client_identifier,
    storage_uri="memory://",
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Custom handler for rate limit exceeded errors"""
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": f"Rate limit exceeded. {exc.detail}",
            "details": None,
        },
        headers={"Retry-After": "60"},
    )
