"""
Application package initializer.

The directory API is split into the usual layers: ``schemas`` hold the
pydantic payloads, ``services`` own the in‑memory directory and its
queries, ``api/v1`` translates HTTP requests into service calls and
``clients`` talks to the mock upstream server.

The application itself lives in ``employee_api.app.main``.  It is not
imported here, so the mock server can reuse ``services.employee_store``
and ``core.logging_config`` without building a directory app.
"""
