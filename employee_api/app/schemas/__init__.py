"""
Pydantic schema definitions for API payloads.

Request bodies are validated here before they reach the service layer,
so services can assume well‑formed input.
"""
