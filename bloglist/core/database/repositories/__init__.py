"""
Database repository layer using SQLModel.

Modules:
- base: BaseRepository interface and QueryBuilder utilities
- blogs: Blog repository operations
- users: User repository operations
"""

from .base import BaseRepository, QueryBuilder
from .blogs import BlogRepository
from .users import UserRepository

__all__ = [
    "BaseRepository",
    "BlogRepository",
    "QueryBuilder",
    "UserRepository",
]
