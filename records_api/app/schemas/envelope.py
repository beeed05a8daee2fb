"""
Response envelope shared by every endpoint.

Successful responses are ``{status, message, data}``.  Error responses
keep the same keys and add ``error`` with the underlying error text
when one is available.
"""

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Schema of every JSON response body."""

    status: int
    message: str
    data: Optional[T] = None
    error: Optional[str] = None


def envelope(status: int, message: str, data: Any = None, error: Optional[str] = None) -> Dict[str, Any]:
    """Build an envelope dict; ``error`` is only included when given."""
    body: Dict[str, Any] = {"status": status, "message": message, "data": data}
    if error is not None:
        body["error"] = error
    return body
