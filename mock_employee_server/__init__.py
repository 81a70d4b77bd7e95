"""
Top‑level package for the mock employee server.

A stand‑in for an upstream employee data provider.  It serves the same
operations as the directory API over randomly generated employees and
is used to seed the directory during development.
"""

__all__ = []
