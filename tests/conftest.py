"""
Shared fixtures for the employee directory tests.

Every test gets fresh application instances, so directories never leak
between tests.
"""

import random
from typing import Callable, List

import pytest
from fastapi.testclient import TestClient

from employee_api.app.main import create_app
from employee_api.app.schemas.employee import Employee, EmployeeCreate
from employee_api.app.services.employee_service import EmployeeService
from mock_employee_server.app.main import create_app as create_mock_app
from mock_employee_server.app.services.mock_employee_service import MockEmployeeService


@pytest.fixture
def service() -> EmployeeService:
    return EmployeeService()


@pytest.fixture
def add_employees(service: EmployeeService) -> Callable[..., List[Employee]]:
    """Create employees from ``(name, salary)`` pairs."""

    def _add(*pairs) -> List[Employee]:
        return [service.create(EmployeeCreate(name=name, salary=salary)) for name, salary in pairs]

    return _add


@pytest.fixture
def client(service: EmployeeService) -> TestClient:
    return TestClient(create_app(service=service))


@pytest.fixture
def mock_service() -> MockEmployeeService:
    return MockEmployeeService(rng=random.Random(1234))


@pytest.fixture
def mock_client(mock_service: MockEmployeeService) -> TestClient:
    return TestClient(create_mock_app(service=mock_service))
