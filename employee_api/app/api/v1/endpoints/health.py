"""Liveness endpoint for API v1."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from employee_api.app.api.deps import get_employee_service
from employee_api.app.services.employee_service import EmployeeService

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health(service: EmployeeService = Depends(get_employee_service)) -> Dict[str, Any]:
    return {"status": "ok", "employees": len(service.store)}
