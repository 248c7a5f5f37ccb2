"""
Query Schemas

Filter and ordering specifications accepted by the persistence client.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class FilterCondition(BaseModel):
    """A single WHERE clause condition"""

    column: str = Field(..., description="Column name to filter on")
    operator: Literal["=", "!=", "<", ">", "<=", ">=", "LIKE", "IN", "NOT IN", "IS NULL", "IS NOT NULL"] = Field(
        default="=", description="Comparison operator"
    )
    value: Any = Field(default=None, description="Value to compare against")


class OrderBy(BaseModel):
    """ORDER BY clause specification"""

    column: str = Field(..., description="Column name to order by")
    direction: Literal["ASC", "DESC"] = Field(default="ASC", description="Sort direction")


def eq(column: str, value: Any) -> FilterCondition:
    """Shorthand for an equality condition"""
    return FilterCondition(column=column, operator="=", value=value)


def gt(column: str, value: Any) -> FilterCondition:
    """Shorthand for a strictly-greater-than condition"""
    return FilterCondition(column=column, operator=">", value=value)
