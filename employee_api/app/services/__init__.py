"""
Service layer abstraction.

``EmployeeStore`` is the owned container for the directory and
``EmployeeService`` holds the business logic on top of it.  The store
is passed to the service explicitly, so swapping the in‑memory dict for
another backend does not touch the API handlers.
"""

from .employee_service import EmployeeNotFoundError, EmployeeService  # noqa: F401
from .employee_store import EmployeeStore  # noqa: F401
