"""
Database layer for the blog list service.

Structure:
- entities/: SQLModel table models (users, blogs)
- repositories/: Data access layer, one repository per table
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and schema creation helpers
"""

from .base import MAX_ID, Base, is_valid_id
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "MAX_ID",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "is_valid_id",
]
