### Description ###
# Altare Planner - Wedding Planning API
# - API Schemas Package -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
API Schemas Package

Contains Pydantic models for request/response validation:
- auth: Planner accounts and login tokens
- vendor: Vendor profiles, access credentials and vendor sessions
- seating: Table templates, tables and chairs
- responses: Common response schemas
"""

from .responses import APIResponse, ErrorDetail, ErrorResponse, ListResponse
from .seating import SeatingTableCreate, SeatingTableResponse, TableChairResponse, TableTemplateResponse
from .vendor import VendorAccessCreatedResponse, VendorResponse, VendorUpdate

__all__ = [
    "APIResponse",
    "ErrorDetail",
    "ErrorResponse",
    "ListResponse",
    "SeatingTableCreate",
    "SeatingTableResponse",
    "TableChairResponse",
    "TableTemplateResponse",
    "VendorAccessCreatedResponse",
    "VendorResponse",
    "VendorUpdate",
]
