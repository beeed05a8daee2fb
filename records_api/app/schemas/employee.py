"""
Pydantic schemas for employee records.

Employees carry arbitrary fields; the only structure imposed is the
integer ``id`` assigned on creation.
"""

from pydantic import BaseModel, ConfigDict, Field


class EmployeeCreate(BaseModel):
    """Schema for creating or merging an employee record."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"name": "Ann", "role": "Engineer"}},
    )


class EmployeeRead(EmployeeCreate):
    """Schema for an employee record returned by the API."""

    id: int = Field(..., examples=[1700000000000])
