"""
Business logic for customers, stored in ``customer.json``.

Besides the generic CRUD operations, customers support a search over
arbitrary fields: every supplied ``field=value`` pair must match the
record as a case-insensitive substring.
"""

from typing import Any, Dict, List, Mapping

from ..schemas.customer import REQUIRED_FIELDS, CustomerCreate
from .query_filter import filter_records
from .record_service import RecordService


class CustomerService(RecordService):
    """Service for managing customer records."""

    document = "customer"
    collection = "customers"
    label = "Customer"
    schema = CustomerCreate
    invalid_message = (
        "Missing required fields: "
        + ", ".join(REQUIRED_FIELDS[:-1])
        + f", and {REQUIRED_FIELDS[-1]} are required."
    )

    async def search(self, criteria: Mapping[str, str]) -> List[Dict[str, Any]]:
        """Return customers matching all ``criteria``; may be empty."""
        document = await self.store.load(self.document)
        found = filter_records(document.records, criteria)
        self.logger.debug("Search %s matched %d of %d customers", dict(criteria), len(found), len(document.records))
        return found
