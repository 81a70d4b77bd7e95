"""
Main entrypoint for the Employee Directory API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds the directory
service the app owns and, when an upstream is configured, seeds it
from the mock employee server during startup.  The module‑level
``app`` lets uvicorn discover the application directly::

    uvicorn employee_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool

from .api.v1.router import router as v1_router
from .clients.mock_server_client import MockServerClient
from .core.config import settings
from .core.logging_config import setup_logging
from .services.employee_service import EmployeeService
from .services.seed_service import seed_from_upstream


logger = logging.getLogger(__name__)


def create_app(
    service: Optional[EmployeeService] = None,
    upstream_client: Optional[MockServerClient] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[EmployeeService]
        Directory service to serve.  A fresh, empty one is created when
        omitted.
    upstream_client : Optional[MockServerClient]
        Client used to seed the directory at startup.  When omitted, one
        is built from ``settings.upstream_url`` if that is set.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    if service is None:
        service = EmployeeService(top_earners_limit=settings.top_earners_limit)
    if upstream_client is None and settings.upstream_url:
        upstream_client = MockServerClient(base_url=settings.upstream_url, timeout=settings.upstream_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if upstream_client is not None:
            # The client is blocking; keep the event loop free while it runs.
            seeded = await run_in_threadpool(seed_from_upstream, service, upstream_client)
            logger.info("Directory starts with %d employees from upstream", seeded)
        yield
        if upstream_client is not None:
            upstream_client.close()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug, lifespan=lifespan)
    app.state.employee_service = service

    app.include_router(v1_router, prefix="/api/v1")
    return app


app = create_app()
