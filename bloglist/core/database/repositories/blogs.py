"""
Blog repository implementation.

This module provides data access operations for blog entries, including
lookups that join each blog with the user who created it.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.blogs import Blog
from ..entities.users import User
from .base import BaseRepository, QueryBuilder


class BlogRepository(BaseRepository[Blog]):
    """Repository for blog data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Blog)

    async def create(self, blog: Blog) -> Blog:
        """Persist a new blog and return it with its generated id."""
        self.session.add(blog)
        await self.session.commit()
        await self.session.refresh(blog)
        return blog

    async def get_by_id(self, blog_id: int) -> Optional[Blog]:
        stmt = select(Blog).where(Blog.id == blog_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, blog: Blog) -> Blog:
        self.session.add(blog)
        await self.session.commit()
        await self.session.refresh(blog)
        return blog

    async def delete(self, blog_id: int) -> bool:
        blog = await self.get_by_id(blog_id)
        if blog:
            await self.session.delete(blog)
            await self.session.commit()
            return True
        return False

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Blog]:
        """List blogs in creation order.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Equality filters on blog fields (e.g. ``author``, ``user_id``)

        Returns:
            List of Blog instances
        """
        stmt = select(Blog).order_by(Blog.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Blog, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_user(self, user_id: int) -> List[Blog]:
        """All blogs created by the given user."""
        return await self.list(filters={"user_id": user_id})

    async def list_with_owners(self) -> List[Tuple[Blog, Optional[User]]]:
        """List every blog together with its creator (``None`` when it has none)."""
        stmt = select(Blog, User).join(User, Blog.user_id == User.id, isouter=True).order_by(Blog.id)
        result = await self.session.execute(stmt)
        return [(blog, owner) for blog, owner in result.all()]

    async def get_with_owner(self, blog_id: int) -> Optional[Tuple[Blog, Optional[User]]]:
        """Get a blog together with its creator, or ``None`` if the blog does not exist."""
        stmt = select(Blog, User).join(User, Blog.user_id == User.id, isouter=True).where(Blog.id == blog_id)
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        blog, owner = row
        return blog, owner
