"""Business logic for employees, stored in ``employee.json``."""

from ..schemas.employee import EmployeeCreate
from .record_service import RecordService


class EmployeeService(RecordService):
    """Service for managing employee records."""

    document = "employee"
    collection = "employees"
    label = "Employee"
    schema = EmployeeCreate
