"""
Customer endpoints.

CRUD over ``customer.json`` plus ``GET /customers/search``, which
filters on any query parameters supplied (``?cust_lName=sm&...``).
New customers and merged updates must keep ``cust_fName``,
``cust_lName`` and ``cust_billingAddress`` non-empty, otherwise the
request is rejected with 400 and nothing is written.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from records_api.app.api.deps import get_customer_service
from records_api.app.api.errors import translate_errors
from records_api.app.schemas.customer import CustomerRead
from records_api.app.schemas.envelope import Envelope, envelope
from records_api.app.services.customer_service import CustomerService

router = APIRouter()


@router.get("", response_model=Envelope[List[CustomerRead]])
async def list_customers(service: CustomerService = Depends(get_customer_service)) -> JSONResponse:
    """Return all customers."""
    with translate_errors("Error reading customer data"):
        customers = await service.list_records()
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=envelope(status.HTTP_200_OK, "Customers retrieved successfully", customers),
    )


@router.get("/search", response_model=Envelope[List[CustomerRead]])
async def search_customers(
    request: Request,
    service: CustomerService = Depends(get_customer_service),
) -> JSONResponse:
    """Find customers whose fields contain every supplied value.

    Matching is a case-insensitive substring test per field, and all
    fields must match.  Returns 404 with an empty list when nothing
    matches.
    """
    criteria = dict(request.query_params)
    with translate_errors("Error searching customers"):
        customers = await service.search(criteria)
    if not customers:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=envelope(status.HTTP_404_NOT_FOUND, "No customers match the search criteria.", []),
        )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=envelope(status.HTTP_200_OK, "Customers found", customers),
    )


@router.get("/id/{customer_id}", response_model=Envelope[CustomerRead])
async def get_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
) -> JSONResponse:
    """Retrieve a single customer by id."""
    with translate_errors("Error reading customer data"):
        customer = await service.get_record(customer_id)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=envelope(status.HTTP_200_OK, "Customer retrieved successfully", customer),
    )


@router.post("", response_model=Envelope[CustomerRead], status_code=status.HTTP_201_CREATED)
async def create_customer(
    payload: Dict[str, Any] = Body(
        ...,
        examples=[{"cust_fName": "Jane", "cust_lName": "Smith", "cust_billingAddress": "1 Main St"}],
    ),
    service: CustomerService = Depends(get_customer_service),
) -> JSONResponse:
    """Create a customer; the ``id`` is assigned by the server."""
    with translate_errors("Error adding customer"):
        customer = await service.create_record(payload)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=envelope(status.HTTP_201_CREATED, "Customer added successfully", customer),
    )


@router.put("/{customer_id}", response_model=Envelope[CustomerRead])
async def update_customer(
    customer_id: int,
    changes: Dict[str, Any] = Body(...),
    service: CustomerService = Depends(get_customer_service),
) -> JSONResponse:
    """Merge the supplied fields into an existing customer."""
    with translate_errors("Error updating customer"):
        customer = await service.update_record(customer_id, changes)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=envelope(status.HTTP_200_OK, "Customer updated successfully", customer),
    )


@router.delete("/{customer_id}", response_model=Envelope[CustomerRead])
async def delete_customer(
    customer_id: int,
    service: CustomerService = Depends(get_customer_service),
) -> JSONResponse:
    """Delete a customer and return the removed record."""
    with translate_errors("Error deleting customer"):
        customer = await service.delete_record(customer_id)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=envelope(status.HTTP_200_OK, "Customer deleted successfully", customer),
    )
