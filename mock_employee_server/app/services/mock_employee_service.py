"""
Business logic for the mock employee server.

``MockEmployeeService`` offers the same queries as the directory
service over randomly generated employees.  Identifiers are matched
case‑insensitively, and deletion reports success as a boolean rather
than raising.  Random data comes from a ``random.Random`` instance so a
fixed seed yields the same employees on every start.
"""

import logging
import random
import uuid
from typing import List, Optional

from employee_api.app.services.employee_store import EmployeeStore

from ..schemas.mock_employee import MockEmployee, MockEmployeeCreate


logger = logging.getLogger(__name__)

EMAIL_TEMPLATE = "{}@company.com"

FIRST_NAMES = [
    "Alice", "Bob", "Charlie", "Diana", "Edward", "Fiona", "George", "Hannah",
    "Ian", "Julia", "Kevin", "Laura", "Michael", "Nora", "Oscar", "Priya",
    "Quentin", "Rachel", "Samuel", "Tara", "Umar", "Victoria", "Walter", "Yara",
]
LAST_NAMES = [
    "Anderson", "Brooks", "Carter", "Dawson", "Ellis", "Foster", "Garcia",
    "Hughes", "Ibrahim", "Jensen", "Kowalski", "Lopez", "Morgan", "Nguyen",
    "Okafor", "Patel", "Reyes", "Schmidt", "Turner", "Watanabe",
]
TITLES = [
    "Software Engineer", "Product Manager", "Data Analyst", "Accountant",
    "Financial Advisor", "Sales Representative", "HR Specialist",
    "Support Engineer", "Designer", "Operations Manager",
]


class MockEmployeeService:
    """Service holding the mock server's generated employees."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.store: EmployeeStore[MockEmployee] = EmployeeStore()

    def generate(self, count: int) -> List[MockEmployee]:
        """Create ``count`` random employees and return them."""
        created = [self.create(self._random_input()) for _ in range(count)]
        logger.info("Generated %d mock employees", len(created))
        return created

    def list_all(self) -> List[MockEmployee]:
        return self.store.snapshot()

    def find_by_id(self, employee_id: str) -> Optional[MockEmployee]:
        return self.store.get(employee_id.lower())

    def search(self, search: str) -> List[MockEmployee]:
        needle = search.lower()
        return [employee for employee in self.store.snapshot() if needle in employee.name.lower()]

    def highest_salary(self) -> int:
        return max((employee.salary for employee in self.store.snapshot()), default=0)

    def top_ten_by_salary(self) -> List[str]:
        ranked = sorted(self.store.snapshot(), key=lambda employee: employee.salary, reverse=True)
        return [employee.name for employee in ranked[:10]]

    def create(self, data: MockEmployeeCreate) -> MockEmployee:
        employee = MockEmployee(
            id=str(uuid.UUID(int=self.rng.getrandbits(128), version=4)),
            email=EMAIL_TEMPLATE.format(self._username(data.name)),
            **data.model_dump(),
        )
        self.store.add(employee.id, employee)
        logger.debug("Added employee: %s", employee)
        return employee

    def delete(self, employee_id: str) -> bool:
        removed = self.store.remove(employee_id.lower())
        if removed is None:
            return False
        logger.debug("Removed employee: %s", removed)
        return True

    def _username(self, name: str) -> str:
        compact = "".join(ch for ch in name.lower() if ch.isalnum())
        return f"{compact or 'employee'}{self.rng.randint(1, 999)}"

    def _random_input(self) -> MockEmployeeCreate:
        return MockEmployeeCreate(
            name=f"{self.rng.choice(FIRST_NAMES)} {self.rng.choice(LAST_NAMES)}",
            salary=self.rng.randint(30_000, 450_000),
            age=self.rng.randint(16, 75),
            title=self.rng.choice(TITLES),
        )
