"""Endpoint routers of the mock server."""
