"""
Pydantic models for mock employees.

Mock employees carry the fields a real upstream provider would return:
age, job title and a generated email address on top of the name and
salary the directory keeps.
"""

from pydantic import BaseModel, Field


class MockEmployeeCreate(BaseModel):
    """Schema for creating a mock employee."""

    name: str = Field(..., min_length=1, examples=["Jill Jenkins"])
    salary: int = Field(..., gt=0, examples=[139082])
    age: int = Field(..., ge=16, le=75, examples=[48])
    title: str = Field(..., min_length=1, examples=["Financial Advisor"])


class MockEmployee(MockEmployeeCreate):
    """Schema for reading a mock employee."""

    id: str
    email: str = Field(..., examples=["jillj@company.com"])

    model_config = {
        "frozen": True,
    }
