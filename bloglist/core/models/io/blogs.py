"""
Blog I/O models for API requests and responses.

``title`` and ``url`` are optional on the request models so that the
endpoints can answer a missing field with a specific error message.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class BlogOwnerRead(BaseModel):
    """The creator of a blog, as embedded in blog responses."""

    id: int
    username: str
    name: Optional[str] = None

    class Config:
        from_attributes = True


class BlogRead(BaseModel):
    """Schema for reading a blog from the API."""

    id: int
    title: str = Field(description="Title of the blog post")
    author: Optional[str] = Field(default=None, description="Author of the blog post")
    url: str = Field(description="Address of the blog post")
    likes: int = Field(description="Number of likes")
    user: Optional[BlogOwnerRead] = Field(default=None, description="User who created the blog")
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BlogCreate(BaseModel):
    """Schema for creating a blog via the API."""

    title: Optional[str] = Field(default=None, description="Title of the blog post")
    author: Optional[str] = Field(default=None, description="Author of the blog post")
    url: Optional[str] = Field(default=None, description="Address of the blog post")
    likes: Optional[int] = Field(default=None, ge=0, description="Number of likes, 0 when omitted")


class BlogUpdate(BaseModel):
    """Schema for updating a blog via the API. Only the fields sent are changed."""

    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    likes: Optional[int] = Field(default=None, ge=0)


OWNER_ONLY_FIELDS = frozenset({"title", "author", "url"})
