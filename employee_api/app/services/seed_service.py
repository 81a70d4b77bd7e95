"""
Seeding the directory from the mock employee server.

Upstream records carry more fields than the directory keeps (age,
title, email) and their own identifiers.  Only ``name`` and ``salary``
are copied; every seeded employee receives a fresh local identifier.
Records that fail validation are skipped and logged.
"""

import logging
from collections.abc import Mapping
from typing import Any, List

from pydantic import ValidationError

from ..clients.mock_server_client import MockServerClient
from ..schemas.employee import EmployeeCreate
from .employee_service import EmployeeService


logger = logging.getLogger(__name__)


def to_create_payloads(records: List[Any]) -> List[EmployeeCreate]:
    payloads: List[EmployeeCreate] = []
    for record in records:
        if not isinstance(record, Mapping):
            logger.warning("Skipping upstream record that is not an object: %r", record)
            continue
        try:
            payloads.append(EmployeeCreate(name=record.get("name"), salary=record.get("salary")))
        except ValidationError as exc:
            logger.warning("Skipping invalid upstream employee %s: %s", record.get("id"), exc.errors())
    return payloads


def seed_from_upstream(service: EmployeeService, client: MockServerClient) -> int:
    """Copy upstream employees into the directory.

    Returns the number of employees created.  An unreachable or failing
    upstream is logged and leaves the directory untouched.
    """
    records, error = client.list_employees()
    if error:
        logger.warning("Could not seed directory from %s: %s", client.base_url, error["message"])
        return 0
    return service.seed(to_create_payloads(records))
