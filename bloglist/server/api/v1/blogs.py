"""
API endpoints for managing blogs.

Reading blogs is public. Creating, updating and deleting a blog requires an
access token; editing the content of a blog or deleting it is reserved for
the user who created it, while any signed-in user may change its likes.
"""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, HTTPException, Path, status

from bloglist.core import blog_stats
from bloglist.core.database.base import MAX_ID
from bloglist.core.database.entities.blogs import Blog
from bloglist.core.database.entities.users import User
from bloglist.core.logging_config import get_logger
from bloglist.core.models.io.blogs import (
    OWNER_ONLY_FIELDS,
    BlogCreate,
    BlogOwnerRead,
    BlogRead,
    BlogUpdate,
)
from bloglist.core.models.io.stats import BlogStats
from bloglist.server.services.deps import BlogRepoDep, CurrentUserDep, UserRepoDep

logger = get_logger(__name__)

router = APIRouter(tags=["blogs"])

# Ids outside the key range can never match a row and are rejected as malformatted
BlogId = Annotated[int, Path(ge=1, le=MAX_ID, description="Id of the blog")]


def to_blog_read(blog: Blog, owner: Optional[User]) -> BlogRead:
    """Build the API representation of a blog with its creator embedded."""
    read = BlogRead.model_validate(blog)
    read.user = BlogOwnerRead.model_validate(owner) if owner else None
    return read


def _blog_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="blog not found")


@router.get(
    "",
    response_model=list[BlogRead],
    summary="List Blogs",
    description="Retrieve every blog together with the user who created it.",
)
async def list_blogs(blogs: BlogRepoDep) -> list[BlogRead]:
    rows = await blogs.list_with_owners()
    logger.debug(f"Retrieved {len(rows)} blogs")
    return [to_blog_read(blog, owner) for blog, owner in rows]


@router.get(
    "/stats",
    response_model=BlogStats,
    summary="Blog Statistics",
    description="Total likes, the favorite blog, and the authors with the most blogs and the most likes.",
)
async def get_blog_stats(blogs: BlogRepoDep) -> BlogStats:
    """
    Aggregate statistics over all stored blogs.

    ``favorite_blog``, ``most_blogs`` and ``most_likes`` are null when there
    are no blogs; ties go to the blog or author stored first.
    """
    return blog_stats.summarize(await blogs.list())


@router.get(
    "/{blog_id}",
    response_model=BlogRead,
    summary="Get Blog",
    responses={404: {"description": "Blog not found"}},
)
async def get_blog(blog_id: BlogId, blogs: BlogRepoDep) -> BlogRead:
    row = await blogs.get_with_owner(blog_id)
    if row is None:
        raise _blog_not_found()
    blog, owner = row
    return to_blog_read(blog, owner)


@router.post(
    "",
    response_model=BlogRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Blog",
    description="Create a blog owned by the signed-in user.",
    responses={
        400: {"description": "Title or url missing"},
        401: {"description": "Token missing or invalid"},
    },
)
async def create_blog(payload: BlogCreate, blogs: BlogRepoDep, user: CurrentUserDep) -> BlogRead:
    """
    Create a new blog.

    - **title**: required.
    - **url**: required.
    - **author**: optional.
    - **likes**: optional, 0 when omitted.
    """
    if not payload.title:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="title missing")
    if not payload.url:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="url missing")

    blog = Blog(
        title=payload.title,
        author=payload.author,
        url=payload.url,
        likes=payload.likes or 0,
        user_id=user.id,
    )
    blog = await blogs.create(blog)
    logger.info(f"User {user.username!r} created blog {blog.id}")
    return to_blog_read(blog, user)


@router.put(
    "/{blog_id}",
    response_model=BlogRead,
    summary="Update Blog",
    description="Update the fields present in the body. Only the creator may change title, author or url.",
    responses={
        401: {"description": "Token missing or invalid"},
        403: {"description": "Not the creator of the blog"},
        404: {"description": "Blog not found"},
    },
)
async def update_blog(
    blog_id: BlogId,
    payload: BlogUpdate,
    blogs: BlogRepoDep,
    users: UserRepoDep,
    user: CurrentUserDep,
) -> BlogRead:
    blog = await blogs.get_by_id(blog_id)
    if blog is None:
        raise _blog_not_found()

    update_data = payload.model_dump(exclude_unset=True)
    if OWNER_ONLY_FIELDS & update_data.keys() and not blog.is_owned_by(user.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="only the creator can edit a blog",
        )
    if "title" in update_data and not update_data["title"]:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="title missing")
    if "url" in update_data and not update_data["url"]:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="url missing")
    if "likes" in update_data and update_data["likes"] is None:
        update_data["likes"] = 0

    for key, value in update_data.items():
        setattr(blog, key, value)
    blog = await blogs.update(blog)

    owner = user if blog.is_owned_by(user.id) else None
    if owner is None and blog.user_id is not None:
        owner = await users.get_by_id(blog.user_id)
    return to_blog_read(blog, owner)


@router.delete(
    "/{blog_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Blog",
    responses={
        204: {"description": "Blog deleted"},
        401: {"description": "Token missing or invalid"},
        403: {"description": "Not the creator of the blog"},
        404: {"description": "Blog not found"},
    },
)
async def delete_blog(blog_id: BlogId, blogs: BlogRepoDep, user: CurrentUserDep) -> None:
    blog = await blogs.get_by_id(blog_id)
    if blog is None:
        raise _blog_not_found()
    if not blog.is_owned_by(user.id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="only the creator can delete a blog",
        )

    await blogs.delete(blog_id)
    logger.info(f"User {user.username!r} deleted blog {blog_id}")
