"""Mock employee server client.

A thin wrapper around the REST API exposed by ``mock_employee_server``.
The client uses the ``requests`` library and never raises on transport
or HTTP failures: every method returns a ``(data, error)`` tuple where
``error`` is ``None`` on success or a dictionary with ``status_code``
and ``message`` keys describing the problem.

* :meth:`list_employees` – return every upstream employee.
* :meth:`get_employee` – fetch a single employee by identifier.
* :meth:`create_employee` – create an employee upstream.
* :meth:`delete_employee` – delete an employee upstream.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

EMPLOYEE_PATH = "/api/v1/employee"


class MockServerClient:
    """Client for the mock employee server."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the mock server, e.g. ``http://localhost:8112``.
            timeout: Per‑request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request against the mock server.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            (or ``None`` for an empty body) and ``error`` is ``None`` on
            success.  On failure ``data`` is ``None``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("Mock server request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("Mock server request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def list_employees(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all upstream employees.

        Returns:
            A tuple ``(employees, error)``.  ``employees`` is empty on
            failure.
        """
        data, error = self._request("GET", EMPLOYEE_PATH)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        # Tolerate the list being wrapped in an envelope.
        if isinstance(data, dict) and isinstance(data.get("data"), list):
            return data["data"], None
        return [], None

    def get_employee(self, employee_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        return self._request("GET", f"{EMPLOYEE_PATH}/{employee_id}")

    def create_employee(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create an employee upstream.

        Args:
            payload: ``name``, ``salary``, ``age`` and ``title`` of the
                new employee.
        """
        return self._request("POST", EMPLOYEE_PATH, json_body=payload)

    def delete_employee(self, employee_id: str) -> Tuple[bool, Optional[Dict[str, Any]]]:
        data, error = self._request("DELETE", f"{EMPLOYEE_PATH}/{employee_id}")
        if error:
            return False, error
        return bool(data), None
