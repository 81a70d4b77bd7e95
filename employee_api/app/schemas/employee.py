"""
Pydantic models for employee data.

``EmployeeCreate`` is the request body accepted by the create endpoint;
``Employee`` is the stored record and the response shape.  Records are
frozen because the directory offers no update operation: once an
employee is created its identifier, name and salary never change.
"""

from pydantic import BaseModel, Field, field_validator


class EmployeeBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Alice Johnson"])
    salary: int = Field(..., ge=0, examples=[85000])


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee.

    The identifier is never accepted from the caller; the service
    generates it.
    """

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v


class Employee(EmployeeBase):
    """Schema for reading an employee from the API."""

    id: str = Field(..., examples=["3f2b8c1e-6a4d-4c1b-9d53-0f7a2e9b1c44"])

    model_config = {
        "frozen": True,
        "from_attributes": True,
    }
