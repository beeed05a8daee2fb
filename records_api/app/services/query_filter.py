"""Case-insensitive substring filtering over record fields."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping


def stringify(value: Any) -> str:
    """Render a field value the way it appears in the JSON document."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def matches(record: Mapping[str, Any], criteria: Mapping[str, str]) -> bool:
    # Every criterion must hold; a missing or null field never matches.
    for field, needle in criteria.items():
        value = record.get(field)
        if value is None:
            return False
        if needle.lower() not in stringify(value).lower():
            return False
    return True


def filter_records(records: List[Dict[str, Any]], criteria: Mapping[str, str]) -> List[Dict[str, Any]]:
    """Return the records matching all ``criteria`` (field -> substring).

    An empty ``criteria`` mapping matches every record.
    """
    return [record for record in records if matches(record, criteria)]
