"""Service layer of the mock server."""

from .mock_employee_service import MockEmployeeService  # noqa: F401
