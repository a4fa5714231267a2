"""Resource Handler — list/get/create/update/delete for one table-backed resource.

Invariants:
    - Identifier parse failures never reach the store (400)
    - Payloads arrive already validated by their pydantic schema
    - Store failures surface as StoreError carrying the driver message (500)
    - get/update/delete on a missing identifier raise ResourceNotFoundError (404);
      identifiers outside the store key range are missing without a store call
    - update echoes the submitted values without re-reading the store
    - delete answers with the full remaining table

Design Decisions:
    - One generic class parameterized by ResourceDescriptor instead of
      per-resource copies; routes pick the descriptor
"""

import logging
from typing import Any

from pydantic import BaseModel

from rental_api.core.errors import (
    InvalidIdentifierError, InvalidInputError, ResourceNotFoundError, StoreError,
)
from rental_api.core.identifiers import fits_store_key, parse_identifier
from rental_api.core.outcomes import Outcome, classify_read, classify_write
from rental_api.core.store_result import StoreResult
from rental_api.infrastructure.resource_store import ResourceStore
from rental_api.services.resource_registry import ResourceDescriptor

logger = logging.getLogger(__name__)


class ResourceHandler:
    """Request handling for a single resource."""

    def __init__(
        self,
        descriptor: ResourceDescriptor,
        store: ResourceStore,
        redact: bool = False,
    ):
        self._resource = descriptor
        self._store = store
        self._redact = redact

    @property
    def label(self) -> str:
        return self._resource.label

    async def list_all(self) -> list[dict[str, Any]]:
        result = await self._store.fetch_all(self._resource.table)
        self._raise_for(classify_read(result), result, "select")
        return [self._present(row) for row in result.rows]

    async def list_where(
        self, column: str, raw_value: str, id_label: str,
    ) -> list[dict[str, Any]]:
        """Rows whose <column> equals the parsed identifier (possibly none)."""
        value = parse_identifier(raw_value)
        if value is None:
            raise InvalidIdentifierError(id_label)
        if not fits_store_key(value):
            return []
        result = await self._store.fetch_where(
            self._resource.table, column, value,
        )
        self._raise_for(classify_read(result), result, "select")
        return [self._present(row) for row in result.rows]

    async def get(self, raw_id: str) -> dict[str, Any]:
        record_id = self._parse_or_invalid_id(raw_id)
        self._require_store_key(record_id)
        result = await self._store.fetch_where(
            self._resource.table, self._resource.id_column, record_id,
        )
        self._raise_for(
            classify_read(result, require_row=True), result, "select", record_id,
        )
        return self._present(result.first)

    async def create(self, payload: BaseModel) -> dict[str, Any]:
        values = payload.model_dump()
        result = await self._store.insert(self._resource.table, values)
        self._raise_for(classify_write(result), result, "insert")
        logger.info(
            f"{self.label} {result.inserted_id} created",
            extra={"resource": self.label, "record_id": result.inserted_id},
        )
        return self._present(
            {self._resource.id_column: result.inserted_id, **values},
        )

    async def update(self, raw_id: str, payload: BaseModel) -> dict[str, Any]:
        record_id = parse_identifier(raw_id)
        if record_id is None:
            raise InvalidInputError()
        self._require_store_key(record_id)
        values = payload.model_dump()
        result = await self._store.update(
            self._resource.table, self._resource.id_column, record_id, values,
        )
        self._raise_for(
            classify_write(result, require_match=True), result, "update", record_id,
        )
        return self._present({self._resource.id_column: record_id, **values})

    async def delete(self, raw_id: str) -> list[dict[str, Any]]:
        record_id = self._parse_or_invalid_id(raw_id)
        self._require_store_key(record_id)
        result = await self._store.delete(
            self._resource.table, self._resource.id_column, record_id,
        )
        self._raise_for(
            classify_write(result, require_match=True), result, "delete", record_id,
        )
        logger.info(
            f"{self.label} {record_id} deleted",
            extra={"resource": self.label, "record_id": record_id},
        )
        return await self.list_all()

    def _parse_or_invalid_id(self, raw_id: str) -> int:
        record_id = parse_identifier(raw_id)
        if record_id is None:
            raise InvalidIdentifierError(self.label)
        return record_id

    def _require_store_key(self, record_id: int) -> None:
        if not fits_store_key(record_id):
            logger.warning(
                f"{self.label} {record_id} not found (outside key range)",
                extra={"resource": self.label},
            )
            raise ResourceNotFoundError(self.label, record_id)

    def _raise_for(
        self,
        outcome: Outcome,
        result: StoreResult,
        operation: str,
        record_id: int | None = None,
    ) -> None:
        if outcome is Outcome.STORE_FAILURE:
            raise StoreError(result.error, operation)
        if outcome is Outcome.NOT_FOUND:
            logger.warning(
                f"{self.label} {record_id} not found",
                extra={"resource": self.label, "record_id": record_id},
            )
            raise ResourceNotFoundError(self.label, record_id)

    def _present(self, record: dict[str, Any]) -> dict[str, Any]:
        if not self._redact:
            return record
        return {
            k: v for k, v in record.items()
            if k not in self._resource.hidden_fields
        }
