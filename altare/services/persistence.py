### Description ###
# Altare Planner - Wedding Planning API
# - Persistence Client -
# Author: Bailey Dixon
# Date: 10/19/2026
# Python: 3.11
####################

"""
Persistence Client

Row-level data access over named collections, used by the services instead
of talking to SQLAlchemy directly:

- select(collection, filters) -> rows
- insert(collection, record | records) -> inserted rows
- update(collection, filters, patch) -> updated rows
- delete(collection, filters) -> number of rows removed
- invoke(function_name, args) -> result of a named server-side function
- current_actor() -> id of the authenticated caller (or None)

Rows are plain dicts keyed by column name. Every write commits its own
transaction. Database failures are rolled back and raised as PersistenceError.

A client is built per request from a Session (see altare.dependencies) and
handed to each service at construction time.
"""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from altare.models import SeatingTable, TableChair, TableTemplate, User, Vendor, VendorAccess
from altare.services.errors import PersistenceError
from altare.services.query_schemas import FilterCondition, OrderBy

logger = logging.getLogger(__name__)

# Collection name -> model
COLLECTIONS: dict[str, type] = {
    "vendor_access": VendorAccess,
    "table_templates": TableTemplate,
    "seating_tables": SeatingTable,
    "table_chairs": TableChair,
    "vendors": Vendor,
    "users": User,
}

Filters = dict[str, Any] | Iterable[FilterCondition | dict] | None
ServerFunction = Callable[..., Any]

# Named server-side functions available through invoke()
SERVER_FUNCTIONS: dict[str, ServerFunction] = {}


def server_function(name: str) -> Callable[[ServerFunction], ServerFunction]:
    """
    Register a server-side function callable through PersistenceClient.invoke.

    The function receives the Session followed by the invoke() args as keywords.

    Usage:
        @server_function("count_tables")
        def count_tables(db: Session, owner_id: str) -> int:
            ...
    """

    def decorator(fn: ServerFunction) -> ServerFunction:
        SERVER_FUNCTIONS[name] = fn
        return fn

    return decorator


@server_function("active_vendor_access_count")
def active_vendor_access_count(db: Session, vendor_id: str, now: datetime | None = None) -> int:
    """Number of credentials for a vendor that have not expired yet"""
    return (
        db.query(func.count(VendorAccess.id))
        .filter(VendorAccess.vendor_id == vendor_id, VendorAccess.expires_at > (now or datetime.utcnow()))
        .scalar()
    )


@server_function("table_chair_count")
def table_chair_count(db: Session, table_id: int) -> int:
    """Number of chairs attached to a table"""
    return db.query(func.count(TableChair.id)).filter(TableChair.table_id == table_id).scalar()


def row_to_dict(row: Any) -> dict[str, Any]:
    """Convert a model instance to a dict of its column values"""
    return {column.name: getattr(row, column.name) for column in row.__table__.columns}


class PersistenceClient:
    """
    Collection-oriented data access bound to one Session and one actor.

    Args:
        db: SQLAlchemy session
        actor_id: Authenticated caller id (None when unauthenticated)
        functions: Server-side function registry (defaults to SERVER_FUNCTIONS)
    """

    def __init__(
        self,
        db: Session,
        actor_id: str | None = None,
        functions: dict[str, ServerFunction] | None = None,
    ):
        self.db = db
        self.actor_id = actor_id
        self.functions = SERVER_FUNCTIONS if functions is None else functions

    def current_actor(self) -> str | None:
        """Id of the authenticated caller, or None"""
        return self.actor_id

    # ========================================
    # Helpers
    # ========================================

    def _model(self, collection: str) -> type:
        model = COLLECTIONS.get(collection)
        if model is None:
            raise PersistenceError(f"Unknown collection '{collection}'")
        return model

    def _column(self, model: type, name: str) -> Any:
        if name not in model.__table__.columns:
            raise PersistenceError(f"Unknown column '{name}' on '{model.__tablename__}'")
        return getattr(model, name)

    def _check_columns(self, model: type, values: dict[str, Any]) -> None:
        for name in values:
            self._column(model, name)

    def _conditions(self, model: type, filters: Filters) -> list[Any]:
        """Translate filters into SQLAlchemy expressions"""
        if not filters:
            return []

        if isinstance(filters, dict):
            conditions = [FilterCondition(column=k, operator="=", value=v) for k, v in filters.items()]
        else:
            conditions = [
                f if isinstance(f, FilterCondition) else FilterCondition.model_validate(f)
                for f in filters
            ]

        expressions = []
        for condition in conditions:
            column = self._column(model, condition.column)
            op, value = condition.operator, condition.value

            if op == "=":
                expressions.append(column.is_(None) if value is None else column == value)
            elif op == "!=":
                expressions.append(column.is_not(None) if value is None else column != value)
            elif op == "<":
                expressions.append(column < value)
            elif op == ">":
                expressions.append(column > value)
            elif op == "<=":
                expressions.append(column <= value)
            elif op == ">=":
                expressions.append(column >= value)
            elif op == "LIKE":
                expressions.append(column.like(value))
            elif op == "IN":
                expressions.append(column.in_(list(value or [])))
            elif op == "NOT IN":
                expressions.append(column.not_in(list(value or [])))
            elif op == "IS NULL":
                expressions.append(column.is_(None))
            elif op == "IS NOT NULL":
                expressions.append(column.is_not(None))

        return expressions

    def _fail(self, action: str, collection: str, exc: SQLAlchemyError) -> PersistenceError:
        """Roll back and build the PersistenceError for a failed call"""
        self.db.rollback()
        detail = str(getattr(exc, "orig", None) or exc)
        logger.error(f"{action} on '{collection}' failed: {detail}")
        return PersistenceError(detail)

    # ========================================
    # Row operations
    # ========================================

    def select(
        self,
        collection: str,
        filters: Filters = None,
        order_by: list[OrderBy] | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        Select rows from a collection.

        Args:
            collection: Collection name (e.g., "table_templates")
            filters: dict of equality conditions or a list of FilterCondition
            order_by: Optional ordering
            limit: Optional maximum number of rows

        Returns:
            List of row dicts (empty if nothing matched)
        """
        model = self._model(collection)
        conditions = self._conditions(model, filters)

        try:
            query = self.db.query(model).filter(*conditions)
            for order in order_by or []:
                column = self._column(model, order.column)
                query = query.order_by(column.desc() if order.direction == "DESC" else column.asc())
            if limit is not None:
                query = query.limit(limit)
            return [row_to_dict(row) for row in query.all()]
        except SQLAlchemyError as e:
            raise self._fail("select", collection, e) from e

    def insert(
        self,
        collection: str,
        records: dict[str, Any] | list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        """
        Insert one record or a batch of records in a single transaction.

        Returns:
            The inserted rows (with generated ids and defaults)
        """
        model = self._model(collection)
        batch = [records] if isinstance(records, dict) else list(records)
        if not batch:
            return []

        for record in batch:
            self._check_columns(model, record)

        try:
            rows = [model(**record) for record in batch]
            self.db.add_all(rows)
            self.db.commit()
            for row in rows:
                self.db.refresh(row)
            return [row_to_dict(row) for row in rows]
        except SQLAlchemyError as e:
            raise self._fail("insert", collection, e) from e

    def update(
        self,
        collection: str,
        filters: Filters,
        patch: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """
        Apply a patch to every row matching the filters.

        Returns:
            The updated rows (empty if nothing matched)
        """
        model = self._model(collection)
        self._check_columns(model, patch)
        conditions = self._conditions(model, filters)

        try:
            rows = self.db.query(model).filter(*conditions).all()
            for row in rows:
                for field, value in patch.items():
                    setattr(row, field, value)
            self.db.commit()
            for row in rows:
                self.db.refresh(row)
            return [row_to_dict(row) for row in rows]
        except SQLAlchemyError as e:
            raise self._fail("update", collection, e) from e

    def delete(self, collection: str, filters: Filters) -> int:
        """
        Delete every row matching the filters.

        Returns:
            Number of rows removed
        """
        model = self._model(collection)
        conditions = self._conditions(model, filters)

        try:
            rows = self.db.query(model).filter(*conditions).all()
            for row in rows:
                self.db.delete(row)
            self.db.commit()
            return len(rows)
        except SQLAlchemyError as e:
            raise self._fail("delete", collection, e) from e

    def invoke(self, function_name: str, args: dict[str, Any] | None = None) -> Any:
        """
        Call a named server-side function.

        Raises:
            PersistenceError: Unknown function or database failure
        """
        fn = self.functions.get(function_name)
        if fn is None:
            raise PersistenceError(f"Unknown function '{function_name}'")

        try:
            return fn(self.db, **(args or {}))
        except SQLAlchemyError as e:
            raise self._fail("invoke", function_name, e) from e
