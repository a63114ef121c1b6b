"""
Blog entity models.

A blog is a link to an article together with its title, author and the
number of likes it has collected. Blogs created through the API record the
user who created them; only that user may edit or delete them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class BlogBase(Base):
    """Base fields for a blog entry."""

    title: str = Field(description="Title of the blog post")
    author: Optional[str] = Field(default=None, description="Author of the blog post")
    url: str = Field(description="Address of the blog post")
    likes: int = Field(default=0, ge=0, description="Number of likes")


class Blog(BlogBase, table=True):
    """Persistent blog entry.

    Table: blogs
    """

    __tablename__ = "blogs"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id", index=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, sa_column_kwargs={"onupdate": utc_now})

    def is_owned_by(self, user_id: Optional[int]) -> bool:
        """Whether ``user_id`` is the creator of this blog."""
        return self.user_id is not None and self.user_id == user_id

    def __repr__(self) -> str:
        return f"Blog(id={self.id}, title={self.title!r}, likes={self.likes})"
