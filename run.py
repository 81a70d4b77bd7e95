"""Unified entry point for the directory API and the mock employee server.

This script launches both applications concurrently in one asyncio
loop, which is handy for local development where the API seeds its
directory from the mock server.  Hosts and ports come from the
``API_HOST``/``API_PORT`` and ``MOCK_HOST``/``MOCK_PORT`` environment
variables.  To seed the API from the mock server, also set for
example ``UPSTREAM_URL=http://localhost:8112``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from employee_api.app.core.config import settings as api_settings
from employee_api.app.core.logging_config import setup_logging
from mock_employee_server.app.core.config import settings as mock_settings


async def serve(app_path: str, host: str, port: int) -> None:
    """Serve one application with uvicorn until it stops."""
    config = Config(app=app_path, host=host, port=port, reload=False, log_level=api_settings.log_level.lower())
    server = Server(config)
    await server.serve()


async def main() -> None:
    """Run both applications, stopping the other if one of them fails."""
    setup_logging(api_settings.log_level, api_settings.log_file)
    # The mock server goes first so it is usually up before the API seeds from it.
    mock_task = asyncio.create_task(serve("mock_employee_server.app.main:app", mock_settings.host, mock_settings.port))
    await asyncio.sleep(1)
    api_task = asyncio.create_task(serve("employee_api.app.main:app", api_settings.host, api_settings.port))
    done, pending = await asyncio.wait([mock_task, api_task], return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    asyncio.run(main())
