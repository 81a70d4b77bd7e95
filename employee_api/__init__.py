"""
Top‑level package for the Employee Directory API.

Makes ``employee_api`` importable as a package so that modules within
``app`` can be referenced by fully qualified names such as
``employee_api.app.main``.  The mock upstream server lives in the
sibling package ``mock_employee_server``.
"""

__all__ = []
