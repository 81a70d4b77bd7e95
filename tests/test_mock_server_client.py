"""
Tests for MockServerClient and seeding the directory from it.

The ``requests`` session is replaced with a mock, so no server has to
be running.
"""

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from employee_api.app.clients.mock_server_client import MockServerClient
from employee_api.app.main import create_app
from employee_api.app.services.seed_service import seed_from_upstream, to_create_payloads

UPSTREAM = [
    {"id": "u-1", "name": "Alice", "salary": 5000, "age": 30, "title": "Engineer", "email": "alice1@company.com"},
    {"id": "u-2", "name": "Bob", "salary": 7000, "age": 41, "title": "Accountant", "email": "bob2@company.com"},
]


def _response(status_code: int = 200, payload: Any = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = b"" if payload is None else b"x"
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error", response=resp)
    return resp


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def upstream(session: MagicMock) -> MockServerClient:
    return MockServerClient(base_url="http://mock:8112/", session=session, timeout=3)


def test_list_employees(upstream: MockServerClient, session: MagicMock):
    session.request.return_value = _response(payload=UPSTREAM)

    employees, error = upstream.list_employees()

    assert error is None
    assert employees == UPSTREAM
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://mock:8112/api/v1/employee"
    assert kwargs["timeout"] == 3


def test_list_employees_unwraps_data_envelope(upstream: MockServerClient, session: MagicMock):
    session.request.return_value = _response(payload={"data": UPSTREAM, "status": "ok"})

    employees, error = upstream.list_employees()

    assert error is None
    assert employees == UPSTREAM


def test_list_employees_connection_error(upstream: MockServerClient, session: MagicMock):
    session.request.side_effect = requests.ConnectionError("connection refused")

    employees, error = upstream.list_employees()

    assert employees == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_get_employee_not_found(upstream: MockServerClient, session: MagicMock):
    session.request.return_value = _response(404, {"detail": "Employee not found"})

    employee, error = upstream.get_employee("missing")

    assert employee is None
    assert error == {"status_code": 404, "message": "Employee not found"}
    assert session.request.call_args.kwargs["url"].endswith("/api/v1/employee/missing")


def test_create_employee(upstream: MockServerClient, session: MagicMock):
    session.request.return_value = _response(201, UPSTREAM[0])
    payload = {"name": "Alice", "salary": 5000, "age": 30, "title": "Engineer"}

    created, error = upstream.create_employee(payload)

    assert error is None
    assert created == UPSTREAM[0]
    assert session.request.call_args.kwargs["json"] == payload


def test_delete_employee(upstream: MockServerClient, session: MagicMock):
    session.request.return_value = _response(payload=True)
    assert upstream.delete_employee("u-1") == (True, None)

    session.request.return_value = _response(404, {"detail": "Employee not found"})
    deleted, error = upstream.delete_employee("u-1")
    assert deleted is False
    assert error["status_code"] == 404


def test_to_create_payloads_skips_invalid_records():
    records = UPSTREAM + [{"id": "u-3", "name": "", "salary": 100}, {"id": "u-4", "name": "Dan"}]

    payloads = to_create_payloads(records)

    assert [(p.name, p.salary) for p in payloads] == [("Alice", 5000), ("Bob", 7000)]


def test_seed_from_upstream(service, upstream: MockServerClient, session: MagicMock):
    session.request.return_value = _response(payload=UPSTREAM)

    assert seed_from_upstream(service, upstream) == 2
    employees = service.list_all()
    assert [(e.name, e.salary) for e in employees] == [("Alice", 5000), ("Bob", 7000)]
    assert {e.id for e in employees}.isdisjoint({"u-1", "u-2"})


def test_seed_from_unreachable_upstream(service, upstream: MockServerClient, session: MagicMock):
    session.request.side_effect = requests.Timeout("timed out")

    assert seed_from_upstream(service, upstream) == 0
    assert service.list_all() == []


def test_app_startup_seeds_directory(service, upstream: MockServerClient, session: MagicMock):
    session.request.return_value = _response(payload=UPSTREAM)

    with TestClient(create_app(service=service, upstream_client=upstream)) as client:
        names = [e["name"] for e in client.get("/api/v1/employees").json()]
        assert names == ["Alice", "Bob"]
        assert client.get("/api/v1/employees/highestSalary").json() == 7000

    session.close.assert_called_once()


def test_error_body_that_is_not_an_object(upstream: MockServerClient, session: MagicMock):
    session.request.return_value = _response(503, ["upstream down"])

    employees, error = upstream.list_employees()

    assert employees == []
    assert error == {"status_code": 503, "message": "['upstream down']"}


def test_error_body_that_is_a_string(upstream: MockServerClient, session: MagicMock):
    session.request.return_value = _response(502, "Bad Gateway")

    employee, error = upstream.get_employee("u-1")

    assert employee is None
    assert error == {"status_code": 502, "message": "Bad Gateway"}


def test_app_starts_empty_when_upstream_error_body_is_not_an_object(
    service, upstream: MockServerClient, session: MagicMock
):
    session.request.return_value = _response(502, "Bad Gateway")

    with TestClient(create_app(service=service, upstream_client=upstream)) as client:
        resp = client.get("/api/v1/employees")
        assert resp.status_code == 200
        assert resp.json() == []


def test_to_create_payloads_skips_records_that_are_not_objects():
    payloads = to_create_payloads(["Alice", 42, None, ["Bob", 7000], UPSTREAM[1]])

    assert [(p.name, p.salary) for p in payloads] == [("Bob", 7000)]


def test_app_seeds_only_object_records(service, upstream: MockServerClient, session: MagicMock):
    session.request.return_value = _response(payload=["Alice", UPSTREAM[0]])

    with TestClient(create_app(service=service, upstream_client=upstream)) as client:
        names = [e["name"] for e in client.get("/api/v1/employees").json()]

    assert names == ["Alice"]
