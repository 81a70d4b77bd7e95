"""Mock employee server application package.

The application lives in ``mock_employee_server.app.main``.
"""
