"""
Main entrypoint for the mock employee server.

The employees are generated when the app is created, so the data is
available as soon as the server accepts requests::

    uvicorn mock_employee_server.app.main:app --port 8112
"""

import random
from typing import Optional

from fastapi import FastAPI

from employee_api.app.core.logging_config import setup_logging

from .api.v1.router import router as v1_router
from .core.config import settings
from .services.mock_employee_service import MockEmployeeService


def create_app(service: Optional[MockEmployeeService] = None, employee_count: Optional[int] = None) -> FastAPI:
    """Create the mock server application.

    Parameters
    ----------
    service : Optional[MockEmployeeService]
        Service to serve.  When omitted, a new one is created and filled
        with random employees.
    employee_count : Optional[int]
        Number of employees to generate for a new service; defaults to
        ``settings.employee_count``.
    """
    setup_logging(settings.log_level, settings.log_file)

    if service is None:
        service = MockEmployeeService(rng=random.Random(settings.random_seed))
        service.generate(settings.employee_count if employee_count is None else employee_count)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.mock_employee_service = service
    app.include_router(v1_router, prefix="/api/v1")
    return app


app = create_app()
