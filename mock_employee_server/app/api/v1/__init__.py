"""Version 1 of the mock server API."""
