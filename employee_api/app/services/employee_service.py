"""
Business logic for the employee directory.

``EmployeeService`` wraps an :class:`EmployeeStore` and implements the
directory operations: listing, substring search by name, point lookup,
the two salary aggregates, creation and deletion.  Lookups report a
missing employee by returning ``None``; deletion raises
:class:`EmployeeNotFoundError` instead.

Identifiers are random UUID4 strings; 122 random bits make a repeat,
even of a deleted identifier, practically impossible.

Ties in the top earners query keep insertion order: the directory
preserves it and Python's sort is stable.
"""

import logging
import uuid
from typing import Iterable, List, Optional

from ..schemas.employee import Employee, EmployeeCreate
from .employee_store import EmployeeStore


logger = logging.getLogger(__name__)

TOP_EARNERS_LIMIT = 10


class EmployeeNotFoundError(LookupError):
    """Raised when an operation targets an identifier that does not exist."""

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee with id {employee_id} not found")


class EmployeeService:
    """Service for managing the in‑memory employee directory."""

    def __init__(
        self,
        store: Optional[EmployeeStore[Employee]] = None,
        top_earners_limit: int = TOP_EARNERS_LIMIT,
    ) -> None:
        self.store: EmployeeStore[Employee] = store if store is not None else EmployeeStore()
        self.top_earners_limit = top_earners_limit

    def list_all(self) -> List[Employee]:
        return self.store.snapshot()

    def search(self, substring: str) -> List[Employee]:
        """Return employees whose name contains ``substring``, ignoring case.

        An empty substring matches every employee.
        """
        needle = substring.lower()
        return [employee for employee in self.store.snapshot() if needle in employee.name.lower()]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self.store.get(employee_id)

    def highest_salary(self) -> int:
        """Return the maximum salary, or 0 when the directory is empty."""
        return max((employee.salary for employee in self.store.snapshot()), default=0)

    def top_ten_by_salary(self) -> List[str]:
        """Return the names of the best paid employees, highest first.

        At most ``top_earners_limit`` names are returned.
        """
        ranked = sorted(self.store.snapshot(), key=lambda employee: employee.salary, reverse=True)
        return [employee.name for employee in ranked[: self.top_earners_limit]]

    def create(self, data: EmployeeCreate) -> Employee:
        employee = Employee(id=str(uuid.uuid4()), name=data.name, salary=data.salary)
        self.store.add(employee.id, employee)
        logger.info("Created employee %s (%s)", employee.id, employee.name)
        return employee

    def delete_by_id(self, employee_id: str) -> Employee:
        """Delete an employee and return the removed record.

        Raises
        ------
        EmployeeNotFoundError
            If no employee with ``employee_id`` exists.  The directory is
            left unchanged in that case.
        """
        removed = self.store.remove(employee_id)
        if removed is None:
            logger.warning("Delete requested for unknown employee %s", employee_id)
            raise EmployeeNotFoundError(employee_id)
        logger.info("Deleted employee %s (%s)", removed.id, removed.name)
        return removed

    def seed(self, records: Iterable[EmployeeCreate]) -> int:
        """Create an employee for each record and return how many were added."""
        count = 0
        for record in records:
            self.create(record)
            count += 1
        logger.info("Seeded directory with %d employees", count)
        return count
