"""Tests for the employee and customer services over a real store."""
from __future__ import annotations

import pytest

from records_api.app.core.errors import ParseError, RecordNotFound, RecordValidationError
from records_api.app.services.customer_service import CustomerService
from records_api.app.services.employee_service import EmployeeService

from .conftest import CUSTOMERS, read_document, write_document


@pytest.fixture()
def employees(store) -> EmployeeService:
    return EmployeeService(store)


@pytest.fixture()
def customers(store) -> CustomerService:
    return CustomerService(store)


async def test_created_employee_can_be_fetched(employees):
    created = await employees.create_record({"name": "Ann"}, now_ms=1)

    assert isinstance(created["id"], int)
    assert created["id"] > 1002
    assert await employees.get_record(created["id"]) == created


async def test_get_missing_employee_message(employees):
    with pytest.raises(RecordNotFound, match="Employee with ID 5 not found."):
        await employees.get_record(5)


async def test_update_merges_and_persists(employees, data_dir):
    updated = await employees.update_record(1001, {"role": "Lead", "team": "Core"})

    assert updated == {"id": 1001, "name": "Ann", "role": "Lead", "team": "Core"}
    assert read_document(data_dir, "employee")["employees"][0] == updated


async def test_update_missing_record_does_not_write(employees, store):
    with pytest.raises(RecordNotFound):
        await employees.update_record(999999, {"name": "x"})
    assert store.revision("employee") == 0


async def test_update_blames_stored_record_for_its_missing_fields(customers, data_dir):
    write_document(
        data_dir,
        "customer",
        {"customers": [{"id": 7, "cust_fName": "Old", "cust_billingAddress": "1 Main St"}]},
    )
    with pytest.raises(RecordValidationError) as excinfo:
        await customers.update_record(7, {"phone": "1"})

    message = str(excinfo.value)
    assert message.startswith("Stored customer with ID 7")
    assert "cust_lName" in message
    assert excinfo.value.fields == ["cust_lName"]


async def test_update_supplying_stored_gap_succeeds(customers, data_dir):
    write_document(
        data_dir,
        "customer",
        {"customers": [{"id": 7, "cust_fName": "Old", "cust_billingAddress": "1 Main St"}]},
    )
    updated = await customers.update_record(7, {"cust_lName": "Timer"})
    assert updated["cust_lName"] == "Timer"


async def test_delete_then_get_raises(employees):
    removed = await employees.delete_record(1002)
    assert removed["name"] == "Bob"
    with pytest.raises(RecordNotFound):
        await employees.get_record(1002)


async def test_customer_create_requires_fields(customers, data_dir):
    with pytest.raises(RecordValidationError) as excinfo:
        await customers.create_record({"cust_fName": "Ann", "cust_lName": "Lee"})

    assert excinfo.value.fields == ["cust_billingAddress"]
    assert str(excinfo.value).startswith("Missing required fields")
    assert len(read_document(data_dir, "customer")["customers"]) == len(CUSTOMERS)


async def test_customer_update_cannot_blank_required_field(customers, data_dir):
    with pytest.raises(RecordValidationError):
        await customers.update_record(2001, {"cust_lName": ""})
    assert read_document(data_dir, "customer")["customers"][0]["cust_lName"] == "Smith"


async def test_customer_search(customers):
    found = await customers.search({"cust_lName": "sm"})
    assert [c["id"] for c in found] == [2001, 2003]
    assert await customers.search({"cust_lName": "nobody"}) == []


async def test_corrupt_document_surfaces_parse_error(customers, data_dir):
    (data_dir / "customer.json").write_text("", encoding="utf-8")
    with pytest.raises(ParseError):
        await customers.list_records()
