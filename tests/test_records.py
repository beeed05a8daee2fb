"""Tests for locating and mutating records in a collection."""
from __future__ import annotations

import pytest

from records_api.app.core.errors import RecordNotFound, RecordValidationError
from records_api.app.services import records as ops


def _records():
    return [
        {"id": 10, "name": "Ann", "dept": "R&D"},
        {"id": 20, "name": "Bob"},
        {"id": 20, "name": "Bob (duplicate)"},
    ]


def _reject_empty_name(payload):
    if not payload.get("name"):
        raise RecordValidationError("name is required", fields=["name"])


def test_find_index_matches_exact_id():
    assert ops.find_index(_records(), 10) == 0


def test_find_index_first_duplicate_wins():
    assert ops.find_index(_records(), 20) == 1


def test_find_index_does_not_coerce_types():
    records = [{"id": "5"}, {"id": True}, {"name": "no id"}]
    with pytest.raises(RecordNotFound):
        ops.find_index(records, 5)
    with pytest.raises(RecordNotFound):
        ops.find_index(records, 1)


def test_next_id_uses_clock_when_free():
    assert ops.next_id(_records(), now_ms=5000) == 5000


def test_next_id_skips_past_existing_ids():
    records = [{"id": 5000}, {"id": 4000}]
    assert ops.next_id(records, now_ms=4500) == 5001
    assert ops.next_id([], now_ms=42) == 42


def test_insert_stamps_id_and_is_findable():
    records = _records()
    payload = {"name": "Cid", "id": 10}
    created = ops.insert_record(records, payload, now_ms=99)

    assert created == {"name": "Cid", "id": 99}
    assert payload == {"name": "Cid", "id": 10}
    assert records[ops.find_index(records, created["id"])] == created


def test_insert_rejected_by_validator_appends_nothing():
    records = _records()
    with pytest.raises(RecordValidationError):
        ops.insert_record(records, {"name": ""}, validate=_reject_empty_name)
    assert records == _records()


def test_merge_keeps_unspecified_fields_and_overrides_supplied():
    records = _records()
    merged = ops.merge_record(records, 10, {"name": "Annie", "title": "Lead"})

    assert merged == {"id": 10, "name": "Annie", "dept": "R&D", "title": "Lead"}
    assert records[0] is merged


def test_merge_never_changes_id():
    records = _records()
    merged = ops.merge_record(records, 10, {"id": 77})
    assert merged["id"] == 10


def test_merge_validates_merged_record():
    records = _records()
    with pytest.raises(RecordValidationError):
        ops.merge_record(records, 10, {"name": ""}, validate=_reject_empty_name)
    assert records[0]["name"] == "Ann"


def test_merge_missing_key_raises():
    with pytest.raises(RecordNotFound):
        ops.merge_record(_records(), 999, {"name": "x"})


def test_delete_returns_record_and_then_lookup_fails():
    records = _records()
    removed = ops.delete_record(records, 10)

    assert removed["name"] == "Ann"
    assert len(records) == 2
    with pytest.raises(RecordNotFound):
        ops.find_index(records, 10)
