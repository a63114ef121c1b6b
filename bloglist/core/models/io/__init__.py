"""
I/O models for API requests and responses.

These Pydantic schemas define the contract between the API endpoints and
clients, and are kept separate from the database entities.

Modules:
- blogs: Blog I/O models
- users: User I/O models
- login: Login request/response models
- stats: Blog aggregate models
"""

from .blogs import (
    OWNER_ONLY_FIELDS,
    BlogCreate,
    BlogOwnerRead,
    BlogRead,
    BlogUpdate,
)
from .login import LoginRequest, LoginResponse
from .stats import AuthorBlogCount, AuthorLikes, BlogStats, FavoriteBlog
from .users import UserBlogRead, UserCreate, UserRead

__all__ = [
    "OWNER_ONLY_FIELDS",
    "AuthorBlogCount",
    "AuthorLikes",
    "BlogCreate",
    "BlogOwnerRead",
    "BlogRead",
    "BlogStats",
    "BlogUpdate",
    "FavoriteBlog",
    "LoginRequest",
    "LoginResponse",
    "UserBlogRead",
    "UserCreate",
    "UserRead",
]
