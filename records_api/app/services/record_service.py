"""
Generic read-modify-write service for one JSON-backed collection.

``RecordService`` binds the store, the locator/mutator helpers and a
pydantic schema to a single document.  Every write runs inside
``DocumentStore.transaction`` so the document is loaded, changed and
saved under the document's write lock; reads load the document without
locking.  Subclasses set the class attributes describing the resource.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from ..core.errors import RecordNotFound, RecordValidationError
from ..core.storage import DocumentStore
from . import records as ops

Record = Dict[str, Any]


class RecordService:
    """CRUD operations over one named document."""

    document: ClassVar[str]
    collection: ClassVar[str]
    label: ClassVar[str]
    schema: ClassVar[Type[BaseModel]]
    # Message used when schema validation fails; ``{fields}`` is replaced
    # by the offending field names.
    invalid_message: ClassVar[str] = "Invalid fields: {fields}"

    def __init__(self, store: DocumentStore) -> None:
        self.store = store
        self.logger = logging.getLogger(f"{__name__}.{self.document}")

    # ------------------------------------------------------------ validation
    def validate(self, payload: Mapping[str, Any]) -> None:
        """Check ``payload`` against the resource schema.

        Raises ``RecordValidationError`` naming the failing fields.
        """
        try:
            self.schema.model_validate(dict(payload))
        except ValidationError as exc:
            fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
            self.logger.warning("Rejected %s payload, invalid fields: %s", self.document, fields)
            raise RecordValidationError(
                self.invalid_message.format(fields=", ".join(fields)), fields=fields
            ) from exc

    def _merge_validator(self, record_id: int, changes: Mapping[str, Any]) -> ops.Validator:
        """Validate a merged record, blaming the stored record for fields the update did not touch."""

        def validate(merged: Mapping[str, Any]) -> None:
            try:
                self.validate(merged)
            except RecordValidationError as exc:
                stored = [name for name in exc.fields if name not in changes]
                if not stored:
                    raise
                raise RecordValidationError(
                    f"Stored {self.label.lower()} with ID {record_id} is missing or has invalid "
                    f"required fields: {', '.join(stored)}. Include them in the update.",
                    fields=exc.fields,
                ) from exc

        return validate

    def _not_found(self, record_id: int) -> RecordNotFound:
        return RecordNotFound(record_id, f"{self.label} with ID {record_id} not found.")

    # ----------------------------------------------------------------- reads
    async def list_records(self) -> List[Record]:
        """Return every record in the collection."""
        document = await self.store.load(self.document)
        return document.records

    async def get_record(self, record_id: int) -> Record:
        """Return the record with ``record_id``; raises ``RecordNotFound``."""
        document = await self.store.load(self.document)
        try:
            return document.records[ops.find_index(document.records, record_id)]
        except RecordNotFound:
            self.logger.warning("%s %s not found", self.label, record_id)
            raise self._not_found(record_id) from None

    # ---------------------------------------------------------------- writes
    async def create_record(self, payload: Mapping[str, Any], now_ms: Optional[int] = None) -> Record:
        """Validate, stamp an id and append a new record."""
        async with self.store.transaction(self.document) as document:
            record = ops.insert_record(document.records, payload, validate=self.validate, now_ms=now_ms)
            document.dirty = True
        self.logger.info("Created %s %s", self.document, record[ops.ID_FIELD])
        return record

    async def update_record(self, record_id: int, changes: Mapping[str, Any]) -> Record:
        """Shallow-merge ``changes`` into an existing record."""
        async with self.store.transaction(self.document) as document:
            try:
                record = ops.merge_record(
                    document.records, record_id, changes, validate=self._merge_validator(record_id, changes)
                )
            except RecordNotFound:
                self.logger.warning("Cannot update %s %s: not found", self.document, record_id)
                raise self._not_found(record_id) from None
            document.dirty = True
        self.logger.info("Updated %s %s", self.document, record_id)
        return record

    async def delete_record(self, record_id: int) -> Record:
        """Remove a record and return it."""
        async with self.store.transaction(self.document) as document:
            try:
                record = ops.delete_record(document.records, record_id)
            except RecordNotFound:
                self.logger.warning("Cannot delete %s %s: not found", self.document, record_id)
                raise self._not_found(record_id) from None
            document.dirty = True
        self.logger.info("Deleted %s %s", self.document, record_id)
        return record
