"""
JSON document store.

Each resource collection lives in its own file, ``<data_dir>/<name>.json``,
holding a single object with one array field, e.g.::

    {"employees": [{"id": 1700000000000, "name": "Ann"}]}

Documents are loaded fresh on every request and written back whole.
Writes go to a temporary sibling file that is renamed over the target,
so a reader never observes a half-written document.  Mutating requests
go through ``DocumentStore.transaction``, which holds a per-document
``asyncio.Lock`` across the whole load -> mutate -> save cycle; two
concurrent writers on the same document are serialised instead of
overwriting each other's changes.

File I/O is run in a worker thread so that a request suspends at I/O
boundaries without blocking the event loop.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, AsyncIterator, Dict, List

from .errors import DocumentNotFound, ParseError, StorageWriteError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


@dataclass
class Document:
    """A loaded document: its name, collection field and records."""

    name: str
    collection: str
    records: List[Record] = field(default_factory=list)
    dirty: bool = False

    def to_json(self) -> Dict[str, List[Record]]:
        return {self.collection: self.records}


class DocumentStore:
    """Load and save named JSON documents under a data directory.

    ``collections`` maps a document name to the name of its array field
    (``{"employee": "employees"}``).  Only registered names can be
    loaded.
    """

    def __init__(self, data_dir: Path, collections: Dict[str, str]) -> None:
        self.data_dir = Path(data_dir)
        self.collections = dict(collections)
        self._locks: Dict[str, asyncio.Lock] = {}
        self._revisions: Dict[str, int] = {}

    # ------------------------------------------------------------------ paths
    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def collection_for(self, name: str) -> str:
        try:
            return self.collections[name]
        except KeyError:
            raise DocumentNotFound(name, str(self.path_for(name))) from None

    def revision(self, name: str) -> int:
        """Number of successful saves of ``name`` made through this store."""
        return self._revisions.get(name, 0)

    def lock_for(self, name: str) -> asyncio.Lock:
        lock = self._locks.get(name)
        if lock is None:
            lock = self._locks[name] = asyncio.Lock()
        return lock

    # --------------------------------------------------------------- sync I/O
    def _read(self, name: str) -> Document:
        collection = self.collection_for(name)
        path = self.path_for(name)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise DocumentNotFound(name, str(path)) from None
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Document '{name}' is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise ParseError(f"Document '{name}' must be a JSON object")
        records = payload.get(collection)
        if not isinstance(records, list):
            raise ParseError(f"Document '{name}' has no '{collection}' array")
        for position, record in enumerate(records):
            if not isinstance(record, dict):
                raise ParseError(
                    f"Document '{name}' has a non-object entry in '{collection}' at position {position}"
                )
        return Document(name=name, collection=collection, records=records)

    def _write(self, document: Document) -> None:
        path = self.path_for(document.name)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(document.to_json(), ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
            os.replace(tmp_path, path)
        except (OSError, TypeError, ValueError) as exc:
            try:
                tmp_path.unlink()
            except FileNotFoundError:
                pass
            raise StorageWriteError(f"Failed to write document '{document.name}': {exc}") from exc

    # -------------------------------------------------------------- async API
    async def load(self, name: str) -> Document:
        """Load ``name`` from disk.

        Raises ``DocumentNotFound`` when the file is missing and
        ``ParseError`` when its content is malformed.
        """
        return await asyncio.to_thread(self._read, name)

    async def save(self, document: Document) -> None:
        """Persist the full document, replacing the previous content."""
        await asyncio.to_thread(self._write, document)
        self._revisions[document.name] = self.revision(document.name) + 1
        document.dirty = False
        logger.debug(
            "Saved document %s (%d records, revision %d)",
            document.name,
            len(document.records),
            self.revision(document.name),
        )

    async def ensure(self, name: str) -> bool:
        """Create an empty document when the file does not exist.

        Returns ``True`` if a document was created.
        """
        collection = self.collection_for(name)
        async with self.lock_for(name):
            if self.path_for(name).exists():
                return False
            await self.save(Document(name=name, collection=collection))
        logger.info("Created empty document %s at %s", name, self.path_for(name))
        return True

    @asynccontextmanager
    async def transaction(self, name: str) -> AsyncIterator[Document]:
        """Hold the document's write lock across a load -> mutate -> save cycle.

        The document is saved on exit only if the body marked it
        ``dirty`` and did not raise; an exception leaves the file as it
        was.
        """
        async with self.lock_for(name):
            document = await self.load(name)
            yield document
            if document.dirty:
                await self.save(document)
