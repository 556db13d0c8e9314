"""
Table-level access to the managed relational store.

Every component receives a TableStore rather than reaching for a global
client, so tests can hand in an in-memory fake.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol
from uuid import UUID

import asyncpg

from backend import db
from backend.errors import FetchError, MutationError

logger = logging.getLogger(__name__)

Row = dict[str, Any]

# Tables and the columns callers may name. Identifiers are interpolated into
# SQL, so nothing outside this map is accepted.
TABLE_COLUMNS: dict[str, frozenset[str]] = {
    "teams": frozenset(
        {"id", "name", "role", "bio", "image_url", "linkedin_url", "email", "status", "created_at"}
    ),
    "competitions": frozenset({"id", "title", "created_at"}),
    "competition_entries": frozenset(
        {
            "id",
            "competition_id",
            "name",
            "email",
            "phone",
            "ticket_number",
            "proof_of_payment_url",
            "status",
            "created_at",
        }
    ),
}

_STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


class TableStore(Protocol):
    """The operations components need from the data store."""

    async def select(
        self,
        table: str,
        *,
        columns: Sequence[str] | None = None,
        filters: Mapping[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
    ) -> list[Row]: ...

    async def insert(self, table: str, row: Mapping[str, Any]) -> Row: ...

    async def update(self, table: str, row_id: UUID, values: Mapping[str, Any]) -> list[Row]: ...

    async def delete(self, table: str, row_id: UUID) -> int: ...


def _check_columns(table: str, columns: Sequence[str]) -> None:
    allowed = TABLE_COLUMNS.get(table)
    if allowed is None:
        raise ValueError(f"Unknown table: {table}")
    unknown = [c for c in columns if c not in allowed]
    if unknown:
        raise ValueError(f"Unknown column(s) for {table}: {', '.join(unknown)}")


def build_select(
    table: str,
    columns: Sequence[str] | None,
    filters: Mapping[str, Any] | None,
    order_by: str | None,
    ascending: bool,
) -> tuple[str, list[Any]]:
    """Build a parameterised SELECT with equality filters and one ORDER BY column."""
    filters = filters or {}
    _check_columns(table, [*(columns or ()), *filters, *([order_by] if order_by else [])])

    column_list = ", ".join(columns) if columns else "*"
    sql = f"SELECT {column_list} FROM {table}"  # nosec B608
    values = list(filters.values())
    if filters:
        sql += " WHERE " + " AND ".join(f"{name} = ${i + 1}" for i, name in enumerate(filters))
    if order_by:
        sql += f" ORDER BY {order_by} {'ASC' if ascending else 'DESC'}"
    return sql, values


class PostgresTableStore:
    """TableStore backed by the asyncpg pool in backend.db."""

    async def select(
        self,
        table: str,
        *,
        columns: Sequence[str] | None = None,
        filters: Mapping[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
    ) -> list[Row]:
        """
        Fetch rows matching all equality filters.

        Raises:
            FetchError: if the store rejects or fails the query
        """
        sql, values = build_select(table, columns, filters, order_by, ascending)
        try:
            async with db.conn() as conn:
                rows = await conn.fetch(sql, *values)
        except _STORE_ERRORS as e:
            logger.warning("select from %s failed: %s", table, e)
            raise FetchError(f"Failed to fetch from {table}") from e
        return [dict(row) for row in rows]

    async def insert(self, table: str, row: Mapping[str, Any]) -> Row:
        """
        Insert one row and return it as stored (generated id and timestamps included).

        Raises:
            MutationError: if the store rejects or fails the insert
        """
        if not row:
            raise ValueError("Cannot insert an empty row")
        _check_columns(table, list(row))
        names = list(row)
        placeholders = ", ".join(f"${i + 1}" for i in range(len(names)))
        sql = f"INSERT INTO {table} ({', '.join(names)}) VALUES ({placeholders}) RETURNING *"  # nosec B608
        try:
            async with db.conn() as conn:
                stored = await conn.fetchrow(sql, *row.values())
        except _STORE_ERRORS as e:
            logger.warning("insert into %s failed: %s", table, e)
            raise MutationError(f"Failed to insert into {table}") from e
        return dict(stored)

    async def update(self, table: str, row_id: UUID, values: Mapping[str, Any]) -> list[Row]:
        """
        Apply a partial update to the row with this id.

        Returns:
            The affected rows (empty if no row has this id)

        Raises:
            MutationError: if the store rejects or fails the update
        """
        if not values:
            raise ValueError("Cannot update with no values")
        _check_columns(table, list(values))
        set_clause = ", ".join(f"{name} = ${i + 2}" for i, name in enumerate(values))
        sql = f"UPDATE {table} SET {set_clause} WHERE id = $1 RETURNING *"  # nosec B608
        try:
            async with db.conn() as conn:
                rows = await conn.fetch(sql, row_id, *values.values())
        except _STORE_ERRORS as e:
            logger.warning("update of %s in %s failed: %s", row_id, table, e)
            raise MutationError(f"Failed to update {table}") from e
        return [dict(row) for row in rows]

    async def delete(self, table: str, row_id: UUID) -> int:
        """
        Delete the row with this id.

        Returns:
            Number of rows deleted

        Raises:
            MutationError: if the store rejects or fails the delete
        """
        _check_columns(table, [])
        try:
            async with db.conn() as conn:
                result = await conn.execute(f"DELETE FROM {table} WHERE id = $1", row_id)  # nosec B608
        except _STORE_ERRORS as e:
            logger.warning("delete of %s from %s failed: %s", row_id, table, e)
            raise MutationError(f"Failed to delete from {table}") from e
        # asyncpg returns the command tag, e.g. "DELETE 1"
        return int(result.split()[-1])


# Singleton instance
table_store = PostgresTableStore()
