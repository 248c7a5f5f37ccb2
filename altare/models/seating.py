### Description ###
# Altare Planner - Wedding Planning API
# - Seating Models -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Seating Models

- TableTemplate: shape + seat count a planner picks from (predefined or user-defined)
- SeatingTable: a table placed on the floor plan, sized from its template
- TableChair: one seat around a table, positioned by angle
"""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from altare.database import Base


class TableTemplate(Base):
    """
    Table template - read-only from the layout generator's point of view.

    Examples:
        - "Round Table (8)" - round, 8 seats
        - "Rectangular Table (10)" - rectangular, 10 seats
    """

    __tablename__ = "table_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    shape = Column(String(30), nullable=False)  # round, rectangular, square, oval, ...
    width = Column(Float, nullable=False)  # base width
    length = Column(Float, nullable=False)  # base length
    seats = Column(Integer, nullable=False)
    is_predefined = Column(Boolean, default=False, nullable=False)
    created_by = Column(String(36), nullable=True)  # owner of user-defined templates
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (CheckConstraint("seats > 0", name="ck_table_templates_seats_positive"),)

    def __repr__(self):
        return f"<TableTemplate(id={self.id}, name='{self.name}', shape='{self.shape}', seats={self.seats})>"


class SeatingTable(Base):
    """Table on a planner's floor plan"""

    __tablename__ = "seating_tables"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    seats = Column(Integer, nullable=False)  # copied from the template
    shape = Column(String(30), nullable=False)
    width = Column(Float, nullable=False)  # computed from shape + seats
    length = Column(Float, nullable=False)
    position_x = Column(Float, default=300, nullable=False)
    position_y = Column(Float, default=200, nullable=False)
    rotation = Column(Float, default=0, nullable=False)
    template_id = Column(Integer, ForeignKey("table_templates.id"), nullable=True)
    created_by = Column(String(36), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    chairs = relationship(
        "TableChair",
        back_populates="table",
        cascade="all, delete-orphan",
        order_by="TableChair.position",
    )

    def __repr__(self):
        return f"<SeatingTable(id={self.id}, name='{self.name}', seats={self.seats})>"


class TableChair(Base):
    """Seat around a table. guest_id stays empty until a guest is seated."""

    __tablename__ = "table_chairs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    table_id = Column(Integer, ForeignKey("seating_tables.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False)  # 1-based seat index
    angle = Column(Float, nullable=False)  # degrees around the table
    guest_id = Column(String(36), nullable=True)
    created_by = Column(String(36), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    table = relationship("SeatingTable", back_populates="chairs")

    __table_args__ = (
        UniqueConstraint("table_id", "position", name="uq_table_chairs_table_position"),
    )

    def __repr__(self):
        return f"<TableChair(id={self.id}, table_id={self.table_id}, position={self.position}, angle={self.angle})>"
