### Description ###
# Altare Planner - Wedding Planning API
# - Request Logging Middleware -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Request Logging Middleware

Logs all API requests with attribution information:
- Who: Bearer token (masked) and client IP
- What: Endpoint, method, parameters
- Result: Status code, response time

Every response carries the request id in the X-Request-ID header.
"""

import logging
import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

# Child of the "altare" logger configured in altare.main
api_logger = logging.getLogger("altare.requests")


def mask_token(authorization: str | None) -> str:
    """Keep only the first characters of a bearer token"""
    if not authorization:
        return "none"
    token = authorization.removeprefix("Bearer ").strip()
    return token[:8] + "..." if len(token) > 8 else token


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for logging all API requests

    Captures:
    - Request ID (short UUID)
    - Method, path and query
    - Bearer token (masked)
    - Client IP
    - Response status and time
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Generate request ID
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        start_time = time.time()

        method = request.method
        path = request.url.path
        query = str(request.url.query) if request.url.query else ""
        client_ip = request.client.host if request.client else "unknown"
        masked_token = mask_token(request.headers.get("Authorization"))

        try:
            response = await call_next(request)
        except Exception as e:
            api_logger.error(f"[{request_id}] ERROR {method} {path} - {e!s}")
            raise

        status_code = response.status_code
        response_time = (time.time() - start_time) * 1000  # ms

        log_entry = (
            f"[{request_id}] "
            f"{method} {path}"
            f"{f'?{query}' if query else ''} "
            f"| token={masked_token} "
            f"| ip={client_ip} "
            f"| status={status_code} "
            f"| time={response_time:.2f}ms"
        )

        if status_code >= 500:
            api_logger.error(log_entry)
        elif status_code >= 400:
            api_logger.warning(log_entry)
        else:
            api_logger.info(log_entry)

        response.headers["X-Request-ID"] = request_id
        return response
