"""
Error taxonomy for the records service.

Every failure raised by the store, locator, mutator and services is a
``RecordsError``.  Endpoints translate them into HTTP responses in
``api.errors``: record misses become 404, validation failures 400 and
everything else 500.
"""

from typing import List, Optional


class RecordsError(Exception):
    """Base class for all service errors."""


class NotFound(RecordsError):
    """Something addressed by name or key does not exist."""


class DocumentNotFound(NotFound):
    """The backing JSON file for a document is missing."""

    def __init__(self, name: str, path: str) -> None:
        super().__init__(f"Document '{name}' not found at {path}")
        self.name = name
        self.path = path


class RecordNotFound(NotFound):
    """No record matches the supplied key."""

    def __init__(self, key, message: Optional[str] = None) -> None:
        super().__init__(message or f"Record with key {key} not found")
        self.key = key


class ParseError(RecordsError):
    """A document is not valid JSON or lacks its collection array."""


class RecordValidationError(RecordsError):
    """A payload does not satisfy the resource schema."""

    def __init__(self, message: str, fields: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class StorageWriteError(RecordsError, OSError):
    """Persisting a document failed."""
