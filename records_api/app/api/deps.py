"""FastAPI dependencies resolving the store and services for a request."""

from fastapi import Depends, Request

from ..core.storage import DocumentStore
from ..services.customer_service import CustomerService
from ..services.employee_service import EmployeeService


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_employee_service(store: DocumentStore = Depends(get_store)) -> EmployeeService:
    return EmployeeService(store)


def get_customer_service(store: DocumentStore = Depends(get_store)) -> CustomerService:
    return CustomerService(store)
