"""
Shared fixtures: a temporary data directory seeded with both documents,
a store over it, and a TestClient for an app pointed at it.
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from records_api.app.core.config import Settings
from records_api.app.core.storage import DocumentStore
from records_api.app.main import build_store, create_app

EMPLOYEES = [
    {"id": 1001, "name": "Ann", "role": "Engineer"},
    {"id": 1002, "name": "Bob", "role": "Designer"},
]

CUSTOMERS = [
    {
        "id": 2001,
        "cust_fName": "Jane",
        "cust_lName": "Smith",
        "cust_billingAddress": "1 Main St, Springfield",
        "vip": True,
    },
    {
        "id": 2002,
        "cust_fName": "John",
        "cust_lName": "Doe",
        "cust_billingAddress": "22 Elm Rd, Shelbyville",
    },
    {
        "id": 2003,
        "cust_fName": "Sam",
        "cust_lName": "Smithers",
        "cust_billingAddress": "5 Oak Ave, Springfield",
        "vip": False,
    },
]


def write_document(data_dir: Path, name: str, payload) -> Path:
    path = data_dir / f"{name}.json"
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def read_document(data_dir: Path, name: str):
    return json.loads((data_dir / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture()
def data_dir(tmp_path) -> Path:
    """Temporary data directory holding seeded employee and customer documents."""
    write_document(tmp_path, "employee", {"employees": [dict(e) for e in EMPLOYEES]})
    write_document(tmp_path, "customer", {"customers": [dict(c) for c in CUSTOMERS]})
    return tmp_path


@pytest.fixture()
def settings(data_dir) -> Settings:
    return Settings(data_dir=str(data_dir), log_level="DEBUG", init_documents=True)


@pytest.fixture()
def store(settings) -> DocumentStore:
    return build_store(settings)


@pytest.fixture()
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
