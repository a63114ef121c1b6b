"""Shared Pydantic models used by the API and the aggregation helpers."""
