### Description ###
# Altare Planner - Wedding Planning API
# - Common Response Schemas -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Common Response Schemas

Pydantic models for standardized API responses.
"""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper"""

    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class ListResponse(BaseModel, Generic[T]):
    """List response with item count"""

    success: bool = True
    data: List[T]
    count: int


class ErrorDetail(BaseModel):
    """Error detail for validation and persistence errors"""

    field: Optional[str] = None
    message: str
    code: Optional[str] = None
    context: Optional[dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Standard error response"""

    success: bool = False
    error: str
    details: Optional[List[ErrorDetail]] = None
    request_id: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = "healthy"
    version: str
    app_db_connected: bool
