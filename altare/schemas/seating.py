### Description ###
# Altare Planner - Wedding Planning API
# - Seating Schemas -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Seating Schemas

Pydantic models for table templates, seating tables and chairs.
"""

from datetime import datetime

from pydantic import BaseModel, Field

# ========================================
# Template Schemas
# ========================================

class TableTemplateCreate(BaseModel):
    """Create a user-defined table template"""
    name: str = Field(..., min_length=1, max_length=100)
    shape: str = Field(..., min_length=1, max_length=30, description="round, rectangular, square, oval, ...")
    width: float = Field(..., gt=0, description="Base width (used as-is for custom shapes)")
    length: float = Field(..., gt=0, description="Base length (used as-is for custom shapes)")
    seats: int = Field(..., ge=1, le=100)


class TableTemplateResponse(BaseModel):
    """Table template"""
    id: int
    name: str
    shape: str
    width: float
    length: float
    seats: int
    is_predefined: bool
    created_at: datetime

    class Config:
        from_attributes = True


# ========================================
# Table Schemas
# ========================================

class SeatingTableCreate(BaseModel):
    """
    Add a table from a template.

    Name and template are checked by the layout service so that an empty
    value is reported the same way as through the service API.
    """
    name: str = Field("", max_length=100, description="Table name")
    template_id: int | None = Field(None, description="Template to size the table from")


class SeatingTableResponse(BaseModel):
    """Table on the floor plan"""
    id: int
    name: str
    seats: int
    shape: str
    width: float
    length: float
    position_x: float
    position_y: float
    rotation: float
    template_id: int | None = None
    created_by: str
    created_at: datetime

    class Config:
        from_attributes = True


# ========================================
# Chair Schemas
# ========================================

class TableChairResponse(BaseModel):
    """Seat around a table"""
    id: int
    table_id: int
    position: int
    angle: float
    guest_id: str | None = None

    class Config:
        from_attributes = True


class ChairAssignment(BaseModel):
    """Seat a guest (or clear the seat with null)"""
    guest_id: str | None = Field(None, max_length=36)


class SeatingTableDetail(SeatingTableResponse):
    """Table with its chairs"""
    chairs: list[TableChairResponse] = Field(default_factory=list)
