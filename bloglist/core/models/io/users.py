"""
User I/O models for API requests and responses.

The password hash never appears in any response model.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class UserBlogRead(BaseModel):
    """A blog as embedded in user responses."""

    id: int
    title: str
    author: Optional[str] = None
    url: str
    likes: int

    class Config:
        from_attributes = True


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    username: str
    name: Optional[str] = None
    blogs: List[UserBlogRead] = Field(default_factory=list, description="Blogs created by the user")

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    """Schema for registering a user via the API."""

    username: Optional[str] = Field(default=None, description="Unique login name, at least 3 characters")
    name: Optional[str] = Field(default=None, description="Display name")
    password: Optional[str] = Field(default=None, description="Plain-text password, at least 3 characters")
