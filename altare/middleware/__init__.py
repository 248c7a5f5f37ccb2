### Description ###
# Altare Planner - Wedding Planning API
# - API Middleware Package -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Middleware Package

Contains middleware for request processing:
- auth: Bearer JWT validation (admin, planner and vendor sessions)
- logging: Request/response logging
- rate_limit: Per-client rate limiting
"""

from .auth import (
    ActorInfo,
    create_access_token,
    get_current_user,
    get_optional_user,
    get_vendor_session,
    require_admin,
    require_vendor_owner,
)
from .logging import RequestLoggingMiddleware

__all__ = [
    "ActorInfo",
    "RequestLoggingMiddleware",
    "create_access_token",
    "get_current_user",
    "get_optional_user",
    "get_vendor_session",
    "require_admin",
    "require_vendor_owner",
]
