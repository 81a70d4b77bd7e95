"""Top‑level router for version 1 of the mock server."""

from fastapi import APIRouter

from .endpoints import mock_employees

router = APIRouter()

router.include_router(mock_employees.router, prefix="/employee", tags=["employee"])
