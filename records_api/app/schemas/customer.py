"""
Pydantic schemas for customer records.

A customer must have a first name, last name and billing address; any
other fields are stored as supplied.  ``CustomerCreate`` is applied to
new records and to the result of every merge-update, so a record can
never be saved without the required fields.
"""

from pydantic import BaseModel, ConfigDict, Field

REQUIRED_FIELDS = ("cust_fName", "cust_lName", "cust_billingAddress")


class CustomerCreate(BaseModel):
    """Schema for creating a customer."""

    model_config = ConfigDict(extra="allow")

    cust_fName: str = Field(..., min_length=1, examples=["Jane"])
    cust_lName: str = Field(..., min_length=1, examples=["Smith"])
    cust_billingAddress: str = Field(..., min_length=1, examples=["1 Main St, Springfield"])


class CustomerRead(CustomerCreate):
    """Schema for a customer record returned by the API."""

    id: int = Field(..., examples=[1700000000000])
