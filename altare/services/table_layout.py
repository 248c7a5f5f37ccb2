### Description ###
# Altare Planner - Wedding Planning API
# - Table Layout Service -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Table Layout Service

Turns a table template + name into a seating table and its chairs:

Sizing (more seats -> bigger table):
- round:        width = length = 30 * sqrt(seats)
- rectangular:  width = 80, length = 40 + 10 * seats
- square:       width = length = 40 + 5 * seats
- oval:         width = 70, length = 40 + 8 * seats
- other shapes: template base width/length, unscaled

Chair angles (degrees):
- round, oval, other: evenly spread, seat i at i * 360 / seats
- rectangular, square: ceil(seats / 4) chairs per side, sides in the order
  top (270), right (0), bottom (90), left (180)

Table and chairs are written in two steps. If the chair insert fails the
table is kept and ChairCreationError is raised; create_missing_chairs()
retries for that table.
"""

import logging
import math
from enum import Enum
from typing import Any

from altare.services.errors import ChairCreationError, NotFoundError, PersistenceError, ValidationError
from altare.services.persistence import PersistenceClient
from altare.services.query_schemas import OrderBy, eq

logger = logging.getLogger(__name__)

# Default canvas placement for new tables
DEFAULT_POSITION_X = 300
DEFAULT_POSITION_Y = 200
DEFAULT_ROTATION = 0

# Side angles for rectangular/square tables: top, right, bottom, left
SIDE_ANGLES = (270, 0, 90, 180)


class TableShape(str, Enum):
    """Table shapes with their own sizing rule. Anything else uses the template size."""

    ROUND = "round"
    RECTANGULAR = "rectangular"
    SQUARE = "square"
    OVAL = "oval"


# Catalogue inserted by seed_predefined_templates()
PREDEFINED_TEMPLATES: list[dict[str, Any]] = [
    {"name": "Round Table (4)", "shape": "round", "width": 100, "length": 100, "seats": 4},
    {"name": "Round Table (6)", "shape": "round", "width": 120, "length": 120, "seats": 6},
    {"name": "Round Table (8)", "shape": "round", "width": 140, "length": 140, "seats": 8},
    {"name": "Round Table (10)", "shape": "round", "width": 160, "length": 160, "seats": 10},
    {"name": "Rectangular Table (6)", "shape": "rectangular", "width": 100, "length": 180, "seats": 6},
    {"name": "Rectangular Table (8)", "shape": "rectangular", "width": 120, "length": 200, "seats": 8},
    {"name": "Rectangular Table (10)", "shape": "rectangular", "width": 120, "length": 240, "seats": 10},
    {"name": "Square Table (4)", "shape": "square", "width": 100, "length": 100, "seats": 4},
    {"name": "Oval Table (6)", "shape": "oval", "width": 120, "length": 180, "seats": 6},
    {"name": "Oval Table (8)", "shape": "oval", "width": 140, "length": 200, "seats": 8},
]


def compute_table_dimensions(
    shape: str,
    seats: int,
    base_width: float,
    base_length: float,
) -> tuple[float, float]:
    """
    Size a table from its shape and seat count.

    Args:
        shape: Template shape
        seats: Number of seats
        base_width: Template width (used for unknown shapes)
        base_length: Template length (used for unknown shapes)

    Returns:
        Tuple of (width, length)
    """
    if shape == TableShape.ROUND:
        size = 30 * math.sqrt(seats)
        return size, size
    if shape == TableShape.RECTANGULAR:
        return 80, 40 + 10 * seats
    if shape == TableShape.SQUARE:
        size = 40 + 5 * seats
        return size, size
    if shape == TableShape.OVAL:
        return 70, 40 + 8 * seats
    return base_width, base_length


def compute_chair_angles(shape: str, seats: int) -> list[float]:
    """
    Angle of each chair, in seat order.

    Example:
        compute_chair_angles("rectangular", 8) -> [270, 270, 0, 0, 90, 90, 180, 180]
    """
    if shape in (TableShape.RECTANGULAR, TableShape.SQUARE):
        per_side = math.ceil(seats / 4)
        return [SIDE_ANGLES[i // per_side] for i in range(seats)]
    return [i * 360 / seats for i in range(seats)]


def build_chair_records(table: dict[str, Any], owner_id: str) -> list[dict[str, Any]]:
    """Chair rows for a table: 1-based positions, no guest assigned"""
    angles = compute_chair_angles(table["shape"], table["seats"])
    return [
        {
            "table_id": table["id"],
            "position": index + 1,
            "angle": angle,
            "guest_id": None,
            "created_by": owner_id,
        }
        for index, angle in enumerate(angles)
    ]


class TableLayoutService:
    """
    Seating table creation and chair layout.

    Every call runs its steps one after the other against the persistence
    client; nothing is fanned out.
    """

    def __init__(self, persistence: PersistenceClient):
        self.persistence = persistence

    # ========================================
    # Templates
    # ========================================

    async def list_templates(self) -> list[dict[str, Any]]:
        """All table templates, ordered by name"""
        return self.persistence.select(
            "table_templates",
            order_by=[OrderBy(column="name", direction="ASC")],
        )

    async def get_template(self, template_id: int) -> dict[str, Any]:
        """
        Fetch one template.

        Raises:
            NotFoundError: No template with that id
        """
        rows = self.persistence.select("table_templates", [eq("id", template_id)])
        if not rows:
            raise NotFoundError("Template not found")
        return rows[0]

    async def create_template(
        self,
        name: str,
        shape: str,
        width: float,
        length: float,
        seats: int,
        owner_id: str | None,
    ) -> dict[str, Any]:
        """Create a user-defined template (is_predefined=False)"""
        if not name or not name.strip():
            raise ValidationError("Please enter a template name", field="name")
        if not owner_id:
            raise ValidationError("Please log in to add templates", field="owner_id")
        if seats < 1:
            raise ValidationError("A table needs at least one seat", field="seats")

        rows = self.persistence.insert(
            "table_templates",
            {
                "name": name.strip(),
                "shape": shape.strip().lower(),
                "width": width,
                "length": length,
                "seats": seats,
                "is_predefined": False,
                "created_by": owner_id,
            },
        )
        return rows[0]

    async def seed_predefined_templates(self) -> list[dict[str, Any]]:
        """
        Insert the predefined catalogue, skipping names that already exist.

        Returns:
            The templates that were added
        """
        existing = {row["name"] for row in self.persistence.select("table_templates")}
        missing = [
            {**template, "is_predefined": True}
            for template in PREDEFINED_TEMPLATES
            if template["name"] not in existing
        ]
        if not missing:
            return []

        added = self.persistence.insert("table_templates", missing)
        logger.info(f"Added {len(added)} predefined table templates")
        return added

    # ========================================
    # Tables
    # ========================================

    async def add_table(self, name: str, template_id: int | None, owner_id: str | None) -> dict[str, Any]:
        """
        Create a table from a template, then its chairs.

        Args:
            name: Table name chosen by the planner
            template_id: Template to size the table from
            owner_id: Current actor

        Returns:
            The created table row (chairs are fetched separately)

        Raises:
            ValidationError: Empty name, no template or no actor (nothing written)
            NotFoundError: Template does not exist (nothing written)
            PersistenceError: Table insert failed
            ChairCreationError: Table was created but its chairs were not
        """
        if not name or not name.strip():
            raise ValidationError("Please enter a table name", field="name")
        if template_id is None or template_id == "":
            raise ValidationError("Please select a table template", field="template_id")
        if not owner_id:
            raise ValidationError("Please log in to add tables", field="owner_id")

        template = await self.get_template(template_id)
        if template["seats"] is None or template["seats"] < 1:
            raise ValidationError("Template has no seats", field="template_id")

        width, length = compute_table_dimensions(
            template["shape"], template["seats"], template["width"], template["length"]
        )

        table = self.persistence.insert(
            "seating_tables",
            {
                "name": name,
                "seats": template["seats"],
                "template_id": template["id"],
                "shape": template["shape"],
                "width": width,
                "length": length,
                "position_x": DEFAULT_POSITION_X,
                "position_y": DEFAULT_POSITION_Y,
                "rotation": DEFAULT_ROTATION,
                "created_by": owner_id,
            },
        )[0]
        logger.info(f"Created table {table['id']} '{name}' ({template['shape']}, {template['seats']} seats) for {owner_id}")

        await self._insert_chairs(table, owner_id)
        return table

    async def _insert_chairs(self, table: dict[str, Any], owner_id: str) -> list[dict[str, Any]]:
        """Insert all chairs for a table in one batch"""
        try:
            return self.persistence.insert("table_chairs", build_chair_records(table, owner_id))
        except PersistenceError as e:
            logger.error(f"Failed to create chairs for table {table['id']}: {e.message}")
            raise ChairCreationError(f"Table created but chairs failed: {e.message}", table=table) from e

    async def list_tables(self, owner_id: str) -> list[dict[str, Any]]:
        """Tables owned by a planner, oldest first"""
        return self.persistence.select(
            "seating_tables",
            {"created_by": owner_id},
            order_by=[OrderBy(column="id")],
        )

    async def get_table(self, table_id: int, owner_id: str) -> dict[str, Any]:
        """
        Fetch a table owned by the planner.

        Raises:
            NotFoundError: Missing table, or owned by someone else
        """
        rows = self.persistence.select("seating_tables", {"id": table_id, "created_by": owner_id})
        if not rows:
            raise NotFoundError(f"Table {table_id} not found")
        return rows[0]

    async def list_chairs(self, table_id: int, owner_id: str) -> list[dict[str, Any]]:
        """Chairs of a table, in seat order"""
        await self.get_table(table_id, owner_id)
        return self.persistence.select(
            "table_chairs",
            {"table_id": table_id},
            order_by=[OrderBy(column="position")],
        )

    async def create_missing_chairs(self, table_id: int, owner_id: str) -> list[dict[str, Any]]:
        """
        Retry chair creation for a table left without chairs.

        Returns:
            The chairs of the table (newly created, or the existing ones)
        """
        table = await self.get_table(table_id, owner_id)
        existing = self.persistence.invoke("table_chair_count", {"table_id": table_id})
        if existing:
            return await self.list_chairs(table_id, owner_id)
        return await self._insert_chairs(table, owner_id)

    async def delete_table(self, table_id: int, owner_id: str) -> None:
        """Delete a table and its chairs"""
        await self.get_table(table_id, owner_id)
        self.persistence.delete("table_chairs", {"table_id": table_id})
        self.persistence.delete("seating_tables", {"id": table_id})
        logger.info(f"Deleted table {table_id} for {owner_id}")

    async def assign_guest(
        self,
        table_id: int,
        position: int,
        guest_id: str | None,
        owner_id: str,
    ) -> dict[str, Any]:
        """
        Seat a guest on a chair, or clear the chair with guest_id=None.

        Raises:
            NotFoundError: Unknown table or seat position
        """
        await self.get_table(table_id, owner_id)
        rows = self.persistence.update(
            "table_chairs",
            {"table_id": table_id, "position": position},
            {"guest_id": guest_id},
        )
        if not rows:
            raise NotFoundError(f"Seat {position} not found on table {table_id}")
        return rows[0]
