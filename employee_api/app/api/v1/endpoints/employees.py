"""
Employee endpoints for API v1.

These routes expose the employee directory: listing, name search,
lookup by identifier, the salary aggregates, creation and deletion.
The fixed paths (``/search``, ``/highestSalary`` and
``/topTenHighestEarningEmployeeNames``) are declared before
``/{employee_id}`` so they are never captured as identifiers.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from employee_api.app.api.deps import get_employee_service
from employee_api.app.schemas.employee import Employee, EmployeeCreate
from employee_api.app.services.employee_service import EmployeeNotFoundError, EmployeeService

router = APIRouter()


@router.get("", response_model=List[Employee])
async def list_employees(service: EmployeeService = Depends(get_employee_service)) -> List[Employee]:
    """Return every employee in the directory."""
    return service.list_all()


@router.get("/search", response_model=List[Employee])
async def search_employees_without_term(service: EmployeeService = Depends(get_employee_service)) -> List[Employee]:
    """Search with an empty term, which matches every employee."""
    return service.search("")


@router.get("/search/{search_string}", response_model=List[Employee])
async def search_employees(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),
) -> List[Employee]:
    """Return employees whose name contains ``search_string`` (case insensitive)."""
    return service.search(search_string)


@router.get("/highestSalary", response_model=int)
async def get_highest_salary(service: EmployeeService = Depends(get_employee_service)) -> int:
    """Return the highest salary, or 0 when the directory is empty."""
    return service.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=List[str])
async def get_top_ten_highest_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),
) -> List[str]:
    """Return up to ten names ordered by descending salary."""
    return service.top_ten_by_salary()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Retrieve a single employee.

    Returns HTTP 404 if the identifier is unknown.
    """
    employee = service.get_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Create a new employee.

    The identifier is generated by the service.  A body missing ``name``
    or ``salary``, or with a negative salary, is rejected with 422.
    """
    return service.create(employee_in)


@router.delete("/{employee_id}", response_class=PlainTextResponse)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> str:
    """Delete an employee and return a plain text confirmation."""
    try:
        service.delete_by_id(employee_id)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return f"Employee with id {employee_id} was deleted"
