"""
Request dependencies shared by the v1 endpoints.

Each application instance owns its own directory, created in
``create_app`` and kept on ``app.state``.
"""

from fastapi import Request

from employee_api.app.services.employee_service import EmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service
