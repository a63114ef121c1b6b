"""
User repository implementation.

This module provides data access operations for user accounts. Usernames are
unique; a duplicate insert rolls the session back and re-raises the
``IntegrityError`` so the API layer can report it.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from bloglist.core.logging_config import get_logger

from ..entities.users import User
from .base import BaseRepository, QueryBuilder

logger = get_logger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def create(self, user: User) -> User:
        """Persist a new user.

        Raises:
            IntegrityError: The username is already taken.
        """
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.info(f"Rejected duplicate username {user.username!r}")
            raise
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, user: User) -> User:
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def delete(self, user_id: int) -> bool:
        user = await self.get_by_id(user_id)
        if user:
            await self.session.delete(user)
            await self.session.commit()
            return True
        return False

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[User]:
        stmt = select(User).order_by(User.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, User, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
