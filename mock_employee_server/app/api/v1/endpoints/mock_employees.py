"""
Mock employee endpoints.

Same surface as the directory API, served under ``/employee``.
Deleting answers with a JSON ``true`` rather than a confirmation text.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from mock_employee_server.app.schemas.mock_employee import MockEmployee, MockEmployeeCreate
from mock_employee_server.app.services.mock_employee_service import MockEmployeeService

router = APIRouter()


def get_mock_employee_service(request: Request) -> MockEmployeeService:
    return request.app.state.mock_employee_service


@router.get("", response_model=List[MockEmployee])
async def list_employees(service: MockEmployeeService = Depends(get_mock_employee_service)) -> List[MockEmployee]:
    return service.list_all()


@router.get("/search/{search_string}", response_model=List[MockEmployee])
async def search_employees(
    search_string: str,
    service: MockEmployeeService = Depends(get_mock_employee_service),
) -> List[MockEmployee]:
    return service.search(search_string)


@router.get("/highestSalary", response_model=int)
async def get_highest_salary(service: MockEmployeeService = Depends(get_mock_employee_service)) -> int:
    return service.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=List[str])
async def get_top_ten_highest_earning_employee_names(
    service: MockEmployeeService = Depends(get_mock_employee_service),
) -> List[str]:
    return service.top_ten_by_salary()


@router.get("/{employee_id}", response_model=MockEmployee)
async def get_employee(
    employee_id: str,
    service: MockEmployeeService = Depends(get_mock_employee_service),
) -> MockEmployee:
    employee = service.find_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.post("", response_model=MockEmployee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_in: MockEmployeeCreate,
    service: MockEmployeeService = Depends(get_mock_employee_service),
) -> MockEmployee:
    return service.create(employee_in)


@router.delete("/{employee_id}", response_model=bool)
async def delete_employee(
    employee_id: str,
    service: MockEmployeeService = Depends(get_mock_employee_service),
) -> bool:
    if not service.delete(employee_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return True
