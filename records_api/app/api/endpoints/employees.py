"""
Employee endpoints.

CRUD over ``employee.json``.  Every response uses the
``{status, message, data}`` envelope; lookups by id return 404 with
``data: null`` when the employee does not exist.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from records_api.app.api.deps import get_employee_service
from records_api.app.api.errors import translate_errors
from records_api.app.schemas.employee import EmployeeRead
from records_api.app.schemas.envelope import Envelope, envelope
from records_api.app.services.employee_service import EmployeeService

router = APIRouter()


@router.get("", response_model=Envelope[List[EmployeeRead]])
async def list_employees(service: EmployeeService = Depends(get_employee_service)) -> JSONResponse:
    """Return all employees."""
    with translate_errors("Error reading employee data"):
        employees = await service.list_records()
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=envelope(status.HTTP_200_OK, "Employees retrieved successfully", employees),
    )


@router.get("/id/{employee_id}", response_model=Envelope[EmployeeRead])
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    """Retrieve a single employee by id."""
    with translate_errors("Error reading employee data"):
        employee = await service.get_record(employee_id)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=envelope(status.HTTP_200_OK, "Employee retrieved successfully", employee),
    )


@router.post("", response_model=Envelope[EmployeeRead], status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: Dict[str, Any] = Body(..., examples=[{"name": "Ann", "role": "Engineer"}]),
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    """Create an employee; the ``id`` is assigned by the server."""
    with translate_errors("Error adding employee"):
        employee = await service.create_record(payload)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=envelope(status.HTTP_201_CREATED, "Employee created successfully", employee),
    )


@router.put("/{employee_id}", response_model=Envelope[EmployeeRead])
async def update_employee(
    employee_id: int,
    changes: Dict[str, Any] = Body(...),
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    """Merge the supplied fields into an existing employee."""
    with translate_errors("Error updating employee"):
        employee = await service.update_record(employee_id, changes)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=envelope(status.HTTP_200_OK, "Employee updated successfully", employee),
    )


@router.delete("/{employee_id}", response_model=Envelope[EmployeeRead])
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    """Delete an employee and return the removed record."""
    with translate_errors("Error deleting employee"):
        employee = await service.delete_record(employee_id)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=envelope(status.HTTP_200_OK, "Employee deleted successfully", employee),
    )
