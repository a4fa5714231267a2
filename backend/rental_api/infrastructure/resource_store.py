"""Resource Store — runs one parameterized statement per call and returns a StoreResult.

Invariants:
    - Every value reaches the database as a bound parameter, never interpolated
    - SQLAlchemy and driver conversion errors (OverflowError, ValueError) are
      caught here, rolled back, logged, and returned as
      StoreResult.failure(<driver message>) — no database exception escapes
    - Numbers bound to Float columns are sent as floats
    - Mutations are committed individually (per-statement atomicity only)
    - Reads return rows as plain dicts in store-native order (no ORDER BY)
"""

import logging
from typing import Any

from sqlalchemy import Float, Table, delete, insert, select, update
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import Executable

from rental_api.core.store_result import StoreResult

logger = logging.getLogger(__name__)

STORE_ERRORS = (SQLAlchemyError, OverflowError, ValueError)


def describe_error(exc: Exception) -> str:
    """Driver-level message when available, SQLAlchemy's otherwise."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def bind_values(table: Table, values: dict[str, Any]) -> dict[str, Any]:
    """Widen ints bound for Float columns so any JSON number fits the column."""
    bound = dict(values)
    for name, value in values.items():
        column = table.c.get(name)
        if (
            column is not None
            and isinstance(column.type, Float)
            and isinstance(value, int)
        ):
            bound[name] = float(value)
    return bound


class ResourceStore:
    """Statement runner bound to one request's session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def fetch_all(self, table: Table) -> StoreResult:
        """SELECT * FROM <table>."""
        return await self._read(select(table), table.name)

    async def fetch_where(
        self, table: Table, column: str, value: Any,
    ) -> StoreResult:
        """SELECT * FROM <table> WHERE <column> = :value."""
        stmt = select(table).where(table.c[column] == value)
        return await self._read(stmt, table.name)

    async def insert(self, table: Table, values: dict[str, Any]) -> StoreResult:
        """INSERT INTO <table> (...) VALUES (...); returns the generated key."""
        try:
            stmt = insert(table).values(**bind_values(table, values))
            result = await self._db.execute(stmt)
            await self._db.commit()
        except STORE_ERRORS as e:
            return await self._fail(e, table.name, "insert")
        key = result.inserted_primary_key
        inserted_id = key[0] if key else None
        return StoreResult(affected=result.rowcount, inserted_id=inserted_id)

    async def update(
        self, table: Table, id_column: str, record_id: int,
        values: dict[str, Any],
    ) -> StoreResult:
        """UPDATE <table> SET ... WHERE <id_column> = :record_id."""
        try:
            bound = bind_values(table, values)
        except STORE_ERRORS as e:
            return await self._fail(e, table.name, "update")
        stmt = (
            update(table)
            .where(table.c[id_column] == record_id)
            .values(**bound)
        )
        return await self._write(stmt, table.name, "update")

    async def delete(
        self, table: Table, id_column: str, record_id: int,
    ) -> StoreResult:
        """DELETE FROM <table> WHERE <id_column> = :record_id."""
        stmt = delete(table).where(table.c[id_column] == record_id)
        return await self._write(stmt, table.name, "delete")

    async def _read(self, stmt: Executable, table_name: str) -> StoreResult:
        try:
            result = await self._db.execute(stmt)
            rows = [dict(row) for row in result.mappings().all()]
        except STORE_ERRORS as e:
            return await self._fail(e, table_name, "select")
        return StoreResult(rows=rows)

    async def _write(
        self, stmt: Executable, table_name: str, operation: str,
    ) -> StoreResult:
        try:
            result = await self._db.execute(stmt)
            await self._db.commit()
        except STORE_ERRORS as e:
            return await self._fail(e, table_name, operation)
        return StoreResult(affected=result.rowcount)

    async def _fail(
        self, exc: Exception, table_name: str, operation: str,
    ) -> StoreResult:
        message = describe_error(exc)
        logger.error(
            f"Store {operation} on {table_name} failed: {message}",
            extra={"operation": operation, "error_code": "STORE_ERROR"},
        )
        await self._db.rollback()
        return StoreResult.failure(message)
