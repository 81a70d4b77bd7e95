"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under a unified prefix.  New domains are
added here by including their routers.
"""

from fastapi import APIRouter

from .endpoints import employees, health

router = APIRouter()

router.include_router(employees.router, prefix="/employees", tags=["employees"])
router.include_router(health.router, prefix="/health", tags=["health"])
