"""
Database entity models.

Modules:
- users: Registered users and their password hashes
- blogs: Blog entries, each optionally owned by the user who created it
"""

from . import blogs, users
from .blogs import Blog, BlogBase
from .users import User, UserBase

__all__ = [
    "Blog",
    "BlogBase",
    "User",
    "UserBase",
    "blogs",
    "users",
]
