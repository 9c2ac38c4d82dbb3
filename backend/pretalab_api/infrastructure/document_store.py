"""SQL Document Store — one schema-validated collection over an async SQLAlchemy table.

Invariants:
    - Malformed id tokens return MalformedId before any query runs
    - Every write validates through the collection's pydantic *Fields model first
    - update() merges the payload into the stored fields, re-validates the merged
      document, then writes; a failed validation leaves the row untouched
    - list_all() orders by created_at, then id for equal timestamps
    - No method raises: unexpected failures are logged and returned as Unexpected

Design Decisions:
    - One generic adapter parameterized by CollectionSpec instead of one class
      per collection: Task and Transaction differ only in schema and messages
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError
from sqlalchemy import delete, select

from pretalab_api.core.domain_types import (
    Resource, is_valid_document_id, normalize_document_id,
)
from pretalab_api.core.store_results import (
    MalformedId, NotFound, Ok, StoreResult, Unexpected, ValidationFailed,
)
from pretalab_api.core.validation import collect_field_errors
from pretalab_api.db.base import Base, utcnow
from pretalab_api.infrastructure.database import DatabaseSessionManager
from pretalab_api.models import Task, Transaction
from pretalab_api.schemas.document import DocumentRead
from pretalab_api.schemas.task import TASK_REQUIRED_MESSAGES, TaskFields, TaskRead
from pretalab_api.schemas.transaction import (
    TRANSACTION_ENUM_MESSAGES, TRANSACTION_REQUIRED_MESSAGES,
    TransactionFields, TransactionRead,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectionSpec:
    """Everything that distinguishes one collection from another."""
    resource: Resource
    label: str
    model: type[Base]
    fields_schema: type[BaseModel]
    read_schema: type[DocumentRead]
    required_messages: Mapping[str, str]
    enum_messages: Mapping[str, str] = field(default_factory=dict)


TASKS = CollectionSpec(
    resource=Resource.TASK,
    label="tarefa",
    model=Task,
    fields_schema=TaskFields,
    read_schema=TaskRead,
    required_messages=TASK_REQUIRED_MESSAGES,
)

TRANSACTIONS = CollectionSpec(
    resource=Resource.TRANSACTION,
    label="transação",
    model=Transaction,
    fields_schema=TransactionFields,
    read_schema=TransactionRead,
    required_messages=TRANSACTION_REQUIRED_MESSAGES,
    enum_messages=TRANSACTION_ENUM_MESSAGES,
)


class SqlDocumentStore:
    """DocumentStore implementation backed by DatabaseSessionManager."""

    def __init__(self, db: DatabaseSessionManager, spec: CollectionSpec):
        self._db = db
        self.spec = spec

    async def list_all(self) -> StoreResult:
        model = self.spec.model
        try:
            async with self._db.session() as db:
                result = await db.execute(
                    select(model).order_by(model.created_at, model.id),
                )
                rows = result.scalars().all()
                return Ok([self._project(row) for row in rows])
        except Exception as e:
            return self._unexpected("list", e)

    async def get(self, token: str) -> StoreResult:
        if not is_valid_document_id(token):
            return MalformedId(token)
        doc_id = normalize_document_id(token)
        try:
            async with self._db.session() as db:
                row = await db.get(self.spec.model, doc_id)
                if row is None:
                    return NotFound(doc_id)
                return Ok(self._project(row))
        except Exception as e:
            return self._unexpected("get", e, doc_id)

    async def create(self, payload: dict[str, Any]) -> StoreResult:
        try:
            validated = self._validate(payload)
            if isinstance(validated, ValidationFailed):
                return validated
            async with self._db.session() as db:
                row = self.spec.model(**validated.model_dump())
                db.add(row)
                await db.commit()
                await db.refresh(row)
                logger.info(
                    f"{self.spec.resource.value} created",
                    extra={"resource": self.spec.resource.value, "document_id": row.id},
                )
                return Ok(self._project(row))
        except Exception as e:
            return self._unexpected("create", e)

    async def update(self, token: str, payload: dict[str, Any]) -> StoreResult:
        if not is_valid_document_id(token):
            return MalformedId(token)
        doc_id = normalize_document_id(token)
        try:
            async with self._db.session() as db:
                row = await db.get(self.spec.model, doc_id)
                if row is None:
                    return NotFound(doc_id)
                validated = self._validate({**self._stored_fields(row), **payload})
                if isinstance(validated, ValidationFailed):
                    return validated
                for name, value in validated.model_dump().items():
                    setattr(row, name, value)
                row.updated_at = utcnow()
                await db.commit()
                await db.refresh(row)
                return Ok(self._project(row))
        except Exception as e:
            return self._unexpected("update", e, doc_id)

    async def delete(self, token: str) -> StoreResult:
        if not is_valid_document_id(token):
            return MalformedId(token)
        doc_id = normalize_document_id(token)
        try:
            async with self._db.session() as db:
                row = await db.get(self.spec.model, doc_id)
                if row is None:
                    return NotFound(doc_id)
                await db.delete(row)
                await db.commit()
                logger.info(
                    f"{self.spec.resource.value} deleted",
                    extra={"resource": self.spec.resource.value, "document_id": doc_id},
                )
                return Ok(None)
        except Exception as e:
            return self._unexpected("delete", e, doc_id)

    async def clear(self) -> None:
        """Remove every document in the collection."""
        async with self._db.session() as db:
            await db.execute(delete(self.spec.model))
            await db.commit()

    # ─── helpers ─────────────────────────────────────────────────

    def _validate(self, payload: Mapping[str, Any]) -> BaseModel | ValidationFailed:
        try:
            return self.spec.fields_schema.model_validate(payload)
        except ValidationError as exc:
            failed = ValidationFailed(
                self.spec.label,
                collect_field_errors(
                    exc, self.spec.required_messages, self.spec.enum_messages,
                ),
            )
            logger.info(
                f"{self.spec.resource.value} rejected: {failed.message}",
                extra={"resource": self.spec.resource.value},
            )
            return failed

    def _stored_fields(self, row: Base) -> dict[str, Any]:
        return {
            name: getattr(row, name)
            for name in self.spec.fields_schema.model_fields
        }

    def _project(self, row: Base) -> dict:
        return self.spec.read_schema.model_validate(row).to_json()

    def _unexpected(
        self, operation: str, exc: Exception, doc_id: str | None = None,
    ) -> Unexpected:
        logger.error(
            f"{self.spec.resource.value} {operation} failed: {exc}",
            exc_info=True,
            extra={"resource": self.spec.resource.value, "document_id": doc_id},
        )
        return Unexpected(str(exc))
