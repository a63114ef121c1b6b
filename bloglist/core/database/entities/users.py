"""
User entity models.

A user registers with a unique username and a password; only the bcrypt
hash of the password is stored.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now

USERNAME_MIN_LENGTH = 3


class UserBase(Base):
    """Base fields for a user."""

    username: str = Field(
        min_length=USERNAME_MIN_LENGTH,
        index=True,
        unique=True,
        description="Unique login name",
    )
    name: Optional[str] = Field(default=None, description="Display name")


class User(UserBase, table=True):
    """Persistent user account.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    password_hash: str = Field(description="bcrypt hash of the user's password")

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username})"
