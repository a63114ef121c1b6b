"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the database layer using SQLModel.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now() -> datetime:
    """Current time in UTC, used for entity timestamps."""
    return datetime.now(timezone.utc)


# Auto-increment primary keys are INTEGER columns (int4 on Postgres)
MAX_ID = 2**31 - 1


def is_valid_id(value: object) -> bool:
    """True if ``value`` can be a primary key of a stored row."""
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= MAX_ID
