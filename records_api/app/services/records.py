"""
Locating and mutating records inside a loaded collection.

These helpers operate on the plain ``list`` of record dicts held by a
``Document``; they never touch storage.  Callers are expected to run
them inside ``DocumentStore.transaction`` so that the change is saved
(or discarded) as a unit.

Records are identified by an integer ``id`` stamped at insert time.
Matching is exact: a stored ``"5"`` does not match key ``5`` and
booleans are never treated as ids.  Array positions are never used as
keys, since they shift whenever an earlier record is deleted.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..core.errors import RecordNotFound

Record = Dict[str, Any]
Validator = Callable[[Mapping[str, Any]], None]

ID_FIELD = "id"


def _is_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def find_index(records: List[Record], key: int) -> int:
    """Return the index of the first record whose ``id`` equals ``key``."""
    for index, record in enumerate(records):
        value = record.get(ID_FIELD)
        if _is_id(value) and value == key:
            return index
    raise RecordNotFound(key)


def next_id(records: List[Record], now_ms: Optional[int] = None) -> int:
    """Return a fresh id: the clock in milliseconds, bumped past existing ids."""
    candidate = int(time.time() * 1000) if now_ms is None else now_ms
    highest = max((r[ID_FIELD] for r in records if _is_id(r.get(ID_FIELD))), default=None)
    if highest is not None and candidate <= highest:
        candidate = highest + 1
    return candidate


def insert_record(
    records: List[Record],
    payload: Mapping[str, Any],
    validate: Optional[Validator] = None,
    now_ms: Optional[int] = None,
) -> Record:
    """Append a copy of ``payload`` with a freshly stamped ``id``."""
    if validate is not None:
        validate(payload)
    record = dict(payload)
    record[ID_FIELD] = next_id(records, now_ms)
    records.append(record)
    return record


def merge_record(
    records: List[Record],
    key: int,
    changes: Mapping[str, Any],
    validate: Optional[Validator] = None,
) -> Record:
    """Shallow-merge ``changes`` over the record with id ``key``.

    Supplied fields win; fields not supplied are kept.  The ``id`` is
    never changed.  ``validate`` sees the merged record before it
    replaces the stored one.
    """
    index = find_index(records, key)
    merged = {**records[index], **changes}
    merged[ID_FIELD] = records[index][ID_FIELD]
    if validate is not None:
        validate(merged)
    records[index] = merged
    return merged


def delete_record(records: List[Record], key: int) -> Record:
    """Remove the record with id ``key`` and return it."""
    return records.pop(find_index(records, key))
