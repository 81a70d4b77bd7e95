"""Pydantic schemas for mock employee payloads."""
