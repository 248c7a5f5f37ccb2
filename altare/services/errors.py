### Description ###
# Altare Planner - Wedding Planning API
# - Service Errors -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Service Errors

Raised by the service layer and translated into HTTP responses by the
exception handlers in altare.main:

- ValidationError   -> 400 (missing/invalid input, nothing was written)
- NotFoundError     -> 404 (referenced record does not exist, nothing was written)
- AccessDeniedError -> 401 (vendor credential rejected - reason is never given)
- PersistenceError  -> 500 (the database call failed)
"""

from typing import Any


class ServiceError(Exception):
    """Base class for service layer errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Missing or invalid input, reported before any database call"""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(ServiceError):
    """A referenced record does not exist"""
    pass


class AccessDeniedError(ServiceError):
    """Vendor credential rejected (unknown token, expired or wrong password)"""

    def __init__(self, message: str = "Invalid or expired access credentials"):
        super().__init__(message)


class PersistenceError(ServiceError):
    """The underlying insert/select/update/delete call failed"""
    pass


class ChairCreationError(PersistenceError):
    """
    Chair insert failed after the table row was committed.

    The table is kept (no compensating delete); `table` holds the created
    row so the caller can retry chair creation for it.
    """

    def __init__(self, message: str, table: dict[str, Any]):
        super().__init__(message)
        self.table = table
