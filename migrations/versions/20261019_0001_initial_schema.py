"""Initial schema - planner accounts, vendors, vendor access, seating

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

Tables:
- users: Planner accounts (owners of tables and custom templates)
- vendors: Vendor directory profiles
- vendor_access: Temporary vendor credentials (token + SHA-256 password hash)
- table_templates: Predefined and user-defined table templates
- seating_tables: Tables on a planner's floor plan
- table_chairs: Seats around each table
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# Revision identifiers, used by Alembic
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create initial database schema."""

    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("display_name", sa.String(length=100), nullable=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, default=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "vendors",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("slug", sa.String(length=220), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("is_hidden", sa.Boolean(), nullable=False, default=False),
        sa.Column("contact_info", sa.JSON(), nullable=False),
        sa.Column("social_media", sa.JSON(), nullable=False),
        sa.Column("pricing_details", sa.JSON(), nullable=False),
        sa.Column("availability", sa.JSON(), nullable=False),
        sa.Column("team_info", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )

    op.create_table(
        "vendor_access",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("vendor_id", sa.String(length=36), nullable=False),
        sa.Column("access_token", sa.String(length=32), nullable=False),
        sa.Column("password_hash", sa.String(length=64), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["vendor_id"], ["vendors.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("access_token"),
    )
    op.create_index("ix_vendor_access_token_expires", "vendor_access", ["access_token", "expires_at"])
    op.create_index("ix_vendor_access_vendor", "vendor_access", ["vendor_id"])

    op.create_table(
        "table_templates",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("shape", sa.String(length=30), nullable=False),
        sa.Column("width", sa.Float(), nullable=False),
        sa.Column("length", sa.Float(), nullable=False),
        sa.Column("seats", sa.Integer(), nullable=False),
        sa.Column("is_predefined", sa.Boolean(), nullable=False, default=False),
        sa.Column("created_by", sa.String(length=36), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("seats > 0", name="ck_table_templates_seats_positive"),
    )

    op.create_table(
        "seating_tables",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("seats", sa.Integer(), nullable=False),
        sa.Column("shape", sa.String(length=30), nullable=False),
        sa.Column("width", sa.Float(), nullable=False),
        sa.Column("length", sa.Float(), nullable=False),
        sa.Column("position_x", sa.Float(), nullable=False, default=300),
        sa.Column("position_y", sa.Float(), nullable=False, default=200),
        sa.Column("rotation", sa.Float(), nullable=False, default=0),
        sa.Column("template_id", sa.Integer(), nullable=True),
        sa.Column("created_by", sa.String(length=36), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["template_id"], ["table_templates.id"]),
    )
    op.create_index("ix_seating_tables_created_by", "seating_tables", ["created_by"])

    op.create_table(
        "table_chairs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("table_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("angle", sa.Float(), nullable=False),
        sa.Column("guest_id", sa.String(length=36), nullable=True),
        sa.Column("created_by", sa.String(length=36), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["table_id"], ["seating_tables.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("table_id", "position", name="uq_table_chairs_table_position"),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("table_chairs")
    op.drop_index("ix_seating_tables_created_by", table_name="seating_tables")
    op.drop_table("seating_tables")
    op.drop_table("table_templates")
    op.drop_index("ix_vendor_access_vendor", table_name="vendor_access")
    op.drop_index("ix_vendor_access_token_expires", table_name="vendor_access")
    op.drop_table("vendor_access")
    op.drop_table("vendors")
    op.drop_table("users")
