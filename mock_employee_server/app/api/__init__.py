"""Versioned routes of the mock server."""
