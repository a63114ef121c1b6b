"""
Aggregate statistics over a list of blogs.

These models are returned both by the pure helpers in
``bloglist.core.blog_stats`` and by the ``/api/blogs/stats`` endpoint.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class FavoriteBlog(BaseModel):
    """The blog with the most likes."""

    title: str
    author: Optional[str] = None
    likes: int


class AuthorBlogCount(BaseModel):
    """The author with the most blogs."""

    author: Optional[str] = None
    blogs: int


class AuthorLikes(BaseModel):
    """The author whose blogs have the most likes in total."""

    author: Optional[str] = None
    likes: int


class BlogStats(BaseModel):
    """All aggregates at once. The optional parts are ``None`` for an empty list."""

    total_likes: int
    favorite_blog: Optional[FavoriteBlog] = None
    most_blogs: Optional[AuthorBlogCount] = None
    most_likes: Optional[AuthorLikes] = None
